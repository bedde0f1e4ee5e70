"""
Errors raised by the SafeSearchParams facade.

Two tiers:
    - ValidationError: the caller opted into a throwing read
      (get_or_throw / get_obj_or_throw) and the raw values did not parse.
    - UnknownFieldError: set_obj was given a field its schema does not
      declare. This is a programming mistake and is never caught here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:
    from safe_search_params.datatypes import Datatype


def format_validation_message(
    property: str, datatype: Datatype, values: Iterable[str], error: str
) -> str:
    """Build the human-readable diagnostic for a failed throwing read."""
    joined = ", ".join(values)
    return (
        f'Failed to validate {datatype.name} rule for property "{property}" '
        f"with values: {joined}. {error}"
    )


class ValidationError(Exception):
    """
    Raised when a throwing read finds raw values its datatype rejects.

    Properties:
        property: Query key that was read
        datatype: Datatype that rejected the values
        values: Raw values seen under the key, in sequence order
        error: Reason reported by the datatype
    """

    def __init__(self, property: str, datatype: Datatype, values: Iterable[str], error: str):
        self.property = property
        self.datatype = datatype
        self.values: Tuple[str, ...] = tuple(values)
        self.error = error
        super().__init__(format_validation_message(property, datatype, self.values, error))


class UnknownFieldError(Exception):
    """Raised when set_obj receives a field that is missing from its schema."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f'Type for "{field}" not found in object')


__all__ = ["ValidationError", "UnknownFieldError", "format_validation_message"]
