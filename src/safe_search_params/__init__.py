"""
Safe Search Params

Typed, order-preserving reads and writes over a URL query string.

ARCHITECTURAL GUARANTEE:
------------------------
Updating one key never disturbs another:
    - unrelated keys keep their position
    - duplicate values keep their relative order
    - a key's existing occurrences are rewritten in place

Every write returns a new SafeSearchParams. Nothing is mutated.
"""

from safe_search_params.datatypes import (
    Datatype,
    Integer,
    Multiple,
    OneOf,
    Present,
    Regex,
    Required,
    String,
)
from safe_search_params.errors import UnknownFieldError, ValidationError
from safe_search_params.merge import merge_entries
from safe_search_params.params import SafeSearchParams, Schema, safe_search_params
from safe_search_params.results import Invalid, ParseResult, Valid
from safe_search_params.sequence import QuerySequence

__version__ = "0.1.0"

__all__ = [
    "Datatype",
    "Integer",
    "Multiple",
    "OneOf",
    "Present",
    "Regex",
    "Required",
    "String",
    "UnknownFieldError",
    "ValidationError",
    "merge_entries",
    "SafeSearchParams",
    "Schema",
    "safe_search_params",
    "Invalid",
    "ParseResult",
    "Valid",
    "QuerySequence",
]
