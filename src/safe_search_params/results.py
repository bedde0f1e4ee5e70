"""
Parse Results for Datatypes

Every call to ``Datatype.parse`` returns a ParseResult, never raises.

Malformed input is an expected outcome, not an exceptional one:
    - Valid carries the typed value
    - Invalid carries a human-readable reason

ARCHITECTURAL RULE:
    Results are produced fresh by each parse call.
    They are immutable and consumed immediately by the caller.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any


class ParseResult(ABC):
    """
    Base class for the two parse outcomes.

    Callers branch on ``result.valid`` rather than on the concrete class.
    """

    @property
    def valid(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Valid(ParseResult):
    """
    Successful parse.

    Properties:
        value: The typed value. May itself be None when the datatype
            represents absence (e.g. String on an empty list).
    """

    value: Any

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid(ParseResult):
    """
    Failed parse.

    Properties:
        error: Reason the raw values do not conform to the datatype
            (e.g. "Invalid integer", "Missing value").
    """

    error: str

    @property
    def valid(self) -> bool:
        return False
