"""
Datatypes: named, stateless converters between raw values and typed values.

A datatype is a pair of pure functions:
    parse(raw_values) -> ParseResult
    serialize(value)  -> list of raw values

``parse`` receives the complete ordered list of raw strings stored under one
key (possibly empty, possibly more than one). ``serialize`` returns the raw
strings that should be stored under a key to represent a value; an empty list
means "no entries for this key".

Single-valued datatypes read only the first raw value ("first wins").
Combinators (Multiple, Required) wrap another datatype.

ARCHITECTURAL RULE:
    parse never raises on malformed input. It returns Invalid.
    Datatypes hold no state and can be shared by any number of callers.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from safe_search_params.results import Invalid, ParseResult, Valid

T = TypeVar("T")

_INTEGER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)")


def _first(values: Sequence[str]) -> Optional[str]:
    if len(values) == 0:
        return None
    return values[0]


class Datatype(ABC, Generic[T]):
    """
    Base class for every datatype.

    Subclasses provide ``name`` (used in diagnostics), ``parse`` and
    ``serialize``. For a value produced by ``parse``, ``parse(serialize(v))``
    should succeed and serialize back to the same raw list. Lossy
    datatypes are allowed but callers must account for it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def parse(self, values: Sequence[str]) -> ParseResult:
        ...

    @abstractmethod
    def serialize(self, value: T) -> List[str]:
        ...


@dataclass(frozen=True)
class String(Datatype[Optional[str]]):
    """First raw value as-is, or None when the key is absent."""

    @property
    def name(self) -> str:
        return "String"

    def parse(self, values: Sequence[str]) -> ParseResult:
        return Valid(_first(values))

    def serialize(self, value: Optional[str]) -> List[str]:
        return [] if value is None else [value]


@dataclass(frozen=True)
class Integer(Datatype[Optional[int]]):
    """
    Decimal integer.

    Only the canonical spelling is accepted: "12" and "-3" parse, while
    "012", "+3", "1.0", "1e3", " 1" and "-0" are Invalid. So are digit
    strings too long for int() to convert.

    Floats are rounded half away from zero on serialize (3.5 -> "4").
    """

    @property
    def name(self) -> str:
        return "Integer"

    def parse(self, values: Sequence[str]) -> ParseResult:
        first = _first(values)
        if first is None:
            return Valid(None)
        if not _INTEGER_RE.fullmatch(first) or first == "-0":
            return Invalid("Invalid integer")
        try:
            parsed = int(first)
        except ValueError:
            # Longer than sys.get_int_max_str_digits()
            return Invalid("Invalid integer")
        return Valid(parsed)

    def serialize(self, value: Optional[int]) -> List[str]:
        if value is None:
            return []
        if isinstance(value, float):
            # Half away from zero
            value = int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
        return [str(int(value))]


@dataclass(frozen=True)
class Present(Datatype[bool]):
    """
    Presence flag.

    True when the key occurs at least once, whatever its value (``?debug``
    and ``?debug=`` both count). Serializes True as a single empty value.
    """

    @property
    def name(self) -> str:
        return "Present"

    def parse(self, values: Sequence[str]) -> ParseResult:
        return Valid(_first(values) is not None)

    def serialize(self, value: bool) -> List[str]:
        return [""] if value is True else []


@dataclass(frozen=True)
class Regex(Datatype[Optional[str]]):
    """
    String that must match a regular expression.

    Matching uses ``search`` semantics; anchor the pattern with ``^...$``
    to require a full match.

    Properties:
        pattern: Compiled pattern (a plain string is compiled on creation)
    """

    pattern: Union[str, re.Pattern]

    def __post_init__(self):
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    @property
    def name(self) -> str:
        return f"Regex<{self.pattern.pattern}>"

    def parse(self, values: Sequence[str]) -> ParseResult:
        first = _first(values)
        if first is None:
            return Valid(None)
        if self.pattern.search(first) is None:
            return Invalid("Invalid value")
        return Valid(first)

    def serialize(self, value: Optional[str]) -> List[str]:
        return [] if value is None else [value]


@dataclass(frozen=True)
class OneOf(Datatype[Optional[str]]):
    """
    String restricted to a fixed set of values (an enumeration).

    Properties:
        values: Accepted values, in declaration order
    """

    values: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def name(self) -> str:
        return f"Enum<{' | '.join(self.values)}>"

    def parse(self, values: Sequence[str]) -> ParseResult:
        first = _first(values)
        if first is None:
            return Valid(None)
        if first not in self.values:
            return Invalid("Invalid value")
        return Valid(first)

    def serialize(self, value: Optional[str]) -> List[str]:
        return [] if value is None else [value]


@dataclass(frozen=True)
class Multiple(Datatype[List[Any]]):
    """
    Every raw value under a key, each parsed by ``subtype``.

    Fails closed: if any single value is rejected, the whole list is
    Invalid and no partial result is returned.

    Properties:
        subtype: Datatype applied to each raw value on its own
    """

    subtype: Datatype

    @property
    def name(self) -> str:
        return f"Multiple<{self.subtype.name}>"

    def parse(self, values: Sequence[str]) -> ParseResult:
        parsed_values = []
        for value in values:
            parsed = self.subtype.parse([value])
            if not parsed.valid:
                return Invalid("Invalid value")
            parsed_values.append(parsed.value)
        return Valid(parsed_values)

    def serialize(self, value: Sequence[Any]) -> List[str]:
        raw: List[str] = []
        for item in value:
            raw.extend(self.subtype.serialize(item))
        return raw


@dataclass(frozen=True)
class Required(Datatype[Any]):
    """
    Wraps a datatype and rejects a parsed value of None.

    An Invalid from the wrapped datatype is passed through unchanged.

    Properties:
        subtype: Wrapped datatype
    """

    subtype: Datatype

    @property
    def name(self) -> str:
        return f"Required<{self.subtype.name}>"

    def parse(self, values: Sequence[str]) -> ParseResult:
        parsed = self.subtype.parse(values)
        if not parsed.valid:
            return parsed
        if parsed.value is None:
            return Invalid("Missing value")
        return parsed

    def serialize(self, value: Any) -> List[str]:
        return self.subtype.serialize(value)


__all__ = [
    "Datatype",
    "String",
    "Integer",
    "Present",
    "Regex",
    "OneOf",
    "Multiple",
    "Required",
]
