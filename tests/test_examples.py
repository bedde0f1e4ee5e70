"""
Test the example listing-page schema.

Validates that the example builders produce a schema that reads the
default listing query and that next_page rewrites only the page entry.
"""

import pytest
from safe_search_params.errors import ValidationError
from safe_search_params.examples import build_listing_params, build_listing_schema, next_page


def test_listing_schema_reads_default_query():
    obj = build_listing_params().get_obj_or_throw(build_listing_schema())

    assert obj == {
        "q": "lamp",
        "page": 2,
        "sort": "price",
        "tag": ["sale", "new"],
        "color": None,
        "in_stock": True,
    }


def test_next_page_keeps_position():
    params = build_listing_params("q=lamp&page=2&tag=sale")
    assert next_page(params).to_string() == "q=lamp&page=3&tag=sale"


def test_next_page_without_page():
    params = build_listing_params("q=lamp")
    assert next_page(params).to_string() == "q=lamp&page=2"


def test_page_is_required():
    with pytest.raises(ValidationError) as excinfo:
        build_listing_params("q=lamp").get_obj_or_throw(build_listing_schema())
    assert excinfo.value.property == "page"
    assert excinfo.value.error == "Missing value"


def test_clearing_filters_in_one_pass():
    schema = build_listing_schema()
    params = build_listing_params()
    cleared = params.set_obj(schema, {"tag": [], "in_stock": False, "sort": None})
    assert cleared.to_string() == "q=lamp&page=2"
