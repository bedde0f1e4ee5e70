"""
Example schema for a product listing page.

Shows how the datatypes compose for a typical URL such as:
    ?q=lamp&page=2&sort=price&tag=sale&tag=new&in_stock
"""
from safe_search_params.datatypes import (
    Integer,
    Multiple,
    OneOf,
    Present,
    Regex,
    Required,
    String,
)
from safe_search_params.params import SafeSearchParams, Schema


def build_listing_schema() -> Schema:
    return {
        "q": String(),
        "page": Required(Integer()),
        "sort": OneOf(["relevance", "price", "rating"]),
        "tag": Multiple(String()),
        "color": Regex(r"^#[0-9a-fA-F]{6}$"),
        "in_stock": Present(),
    }


def build_listing_params(query: str = "q=lamp&page=2&sort=price&tag=sale&tag=new&in_stock") -> SafeSearchParams:
    return SafeSearchParams(query)


def next_page(params: SafeSearchParams) -> SafeSearchParams:
    """Advance ``page`` by one, keeping every other parameter where it is."""
    page = params.get("page", Integer())
    if page is None:
        page = 1
    return params.set("page", Integer(), page + 1)
