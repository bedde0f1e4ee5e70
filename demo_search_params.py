#!/usr/bin/env python3
"""
Demo: Typed reads and order-preserving writes on a listing-page query.
"""

from safe_search_params import Multiple, String, ValidationError
from safe_search_params.examples import build_listing_params, build_listing_schema, next_page
from safe_search_params.serialization import params_to_yaml


def main():
    schema = build_listing_schema()
    params = build_listing_params()

    print("=" * 70)
    print("SAFE SEARCH PARAMS DEMO")
    print("=" * 70)
    print(f"\nQuery:     {params}")
    print(f"Parsed:    {params.get_obj(schema)}")

    print("\nNEXT PAGE:")
    print("-" * 70)
    print(f"  {next_page(params)}")

    print("\nADD A TAG (in-place rewrite, extra value appended):")
    print("-" * 70)
    tags = params.get("tag", Multiple(String())) or []
    print(f"  {params.set('tag', Multiple(String()), tags + ['clearance'])}")

    print("\nCLEAR FILTERS (single pass):")
    print("-" * 70)
    print(f"  {params.set_obj(schema, {'tag': [], 'in_stock': False, 'sort': None})}")

    print("\nSTRICT READ OF A BAD PAGE:")
    print("-" * 70)
    try:
        params.set("page", String(), "two").get_obj_or_throw(schema)
    except ValidationError as e:
        print(f"  {e}")
        print(f"  property={e.property} datatype={e.datatype.name} values={list(e.values)}")

    print("\nSNAPSHOT (YAML):")
    print("-" * 70)
    print(params_to_yaml(params))


if __name__ == "__main__":
    main()
