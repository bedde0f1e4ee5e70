"""
SafeSearchParams - typed, immutable facade over a QuerySequence.

Reads parse raw values through a Datatype. Writes serialize a value through
a Datatype and return a NEW facade; the receiver is never modified, so one
instance can be shared freely, including across threads.

Lenient vs strict reads:
    get / get_obj              parse failure -> None (same as "absent")
    get_or_throw / get_obj_or_throw
                               parse failure -> ValidationError

Usage:
    params = safe_search_params("page=2&tag=a&tag=b")
    params.get("page", Integer())                  # 2
    params.get("tag", Multiple(String()))          # ["a", "b"]
    params.set("page", Integer(), 3).to_string()   # "page=3&tag=a&tag=b"
"""

import logging
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from safe_search_params.datatypes import Datatype
from safe_search_params.errors import UnknownFieldError, ValidationError
from safe_search_params.merge import merge_entries
from safe_search_params.results import ParseResult
from safe_search_params.sequence import Entry, QueryInit, QuerySequence

logger = logging.getLogger(__name__)

Schema = Mapping[str, Datatype]


class SafeSearchParams:
    """
    One immutable typed view over a query string.

    Properties:
        sequence: Backing QuerySequence (read-only)
        entries: Backing (key, value) pairs, in order
    """

    __slots__ = ("_sequence", "_cache")

    def __init__(self, init: Union[QueryInit, "SafeSearchParams"] = None) -> None:
        if isinstance(init, SafeSearchParams):
            init = init.sequence
        self._sequence = QuerySequence(init)
        # Per-instance; populated lazily per key
        self._cache: Dict[str, Tuple[str, ...]] = {}

    @property
    def sequence(self) -> QuerySequence:
        return self._sequence

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._sequence.entries

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, name: str, datatype: Datatype) -> Any:
        """
        Value of ``name`` as ``datatype``, or None.

        A value that fails to parse is reported as None, exactly like a
        missing key. Use get_or_throw to tell the two apart.
        """
        parsed = self._parse(name, datatype)
        if parsed.valid:
            return parsed.value
        return None

    def get_or_throw(self, name: str, datatype: Datatype) -> Any:
        """
        Value of ``name`` as ``datatype``.

        Returns whatever the datatype produced, which may be None for a
        non-required datatype on a missing key.

        Raises:
            ValidationError: If the datatype rejects the raw values
        """
        parsed = self._parse(name, datatype)
        if not parsed.valid:
            logger.debug("Validation failed for %r as %s: %s", name, datatype.name, parsed.error)
            raise ValidationError(name, datatype, self._get_all(name), parsed.error)
        return parsed.value

    def has(self, name: str, datatype: Datatype) -> bool:
        """True if ``name`` occurs at least once AND its values parse."""
        values = self._get_all(name)
        if len(values) == 0:
            return False
        return datatype.parse(values).valid

    def get_obj(self, schema: Schema) -> Dict[str, Any]:
        """Apply get to each field of ``schema``; failures become None."""
        return {name: self.get(name, datatype) for name, datatype in schema.items()}

    def get_obj_or_throw(self, schema: Schema) -> Dict[str, Any]:
        """
        Apply get_or_throw to each field of ``schema`` in order.

        Raises:
            ValidationError: For the first field that fails; no partial
                result is returned
        """
        output: Dict[str, Any] = {}
        for name, datatype in schema.items():
            output[name] = self.get_or_throw(name, datatype)
        return output

    # ------------------------------------------------------------------
    # Writes (each returns a new instance)
    # ------------------------------------------------------------------

    def append(self, name: str, datatype: Datatype, value: Any) -> "SafeSearchParams":
        """Add the serialized values of ``value`` after every existing entry."""
        return SafeSearchParams(self._sequence.with_appended(name, datatype.serialize(value)))

    def delete(self, name: str) -> "SafeSearchParams":
        """Remove every entry for ``name``; other entries keep their order."""
        return SafeSearchParams(self._sequence.without(name))

    def set(self, name: str, datatype: Datatype, value: Any) -> "SafeSearchParams":
        """
        Replace the values of ``name`` in place.

        Existing occurrences are overwritten where they sit; surplus
        occurrences are dropped and extra values are appended at the end.
        """
        return SafeSearchParams(merge_entries(self._sequence, {name: datatype.serialize(value)}))

    def sort(self) -> "SafeSearchParams":
        """Stable sort of all entries by key."""
        return SafeSearchParams(self._sequence.sorted())

    def set_obj(self, schema: Schema, values: Mapping[str, Any]) -> "SafeSearchParams":
        """
        Set several fields at once, in a single pass over the entries.

        Fields of ``schema`` that are not in ``values`` are left untouched.

        Raises:
            UnknownFieldError: If ``values`` has a field ``schema`` lacks
        """
        updates: Dict[str, list] = {}
        for name, value in values.items():
            datatype: Optional[Datatype] = schema.get(name)
            if datatype is None:
                raise UnknownFieldError(name)
            updates[name] = datatype.serialize(value)
        return SafeSearchParams(merge_entries(self._sequence, updates))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        return self._sequence.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SafeSearchParams({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeSearchParams):
            return self._sequence == other._sequence
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._sequence)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get_all(self, name: str) -> Tuple[str, ...]:
        values = self._cache.get(name)
        if values is not None:
            return values
        # setdefault keeps the first writer's value if two readers race
        return self._cache.setdefault(name, tuple(self._sequence.get_all(name)))

    def _parse(self, name: str, datatype: Datatype) -> ParseResult:
        return datatype.parse(self._get_all(name))


def safe_search_params(init: Union[QueryInit, SafeSearchParams] = None) -> SafeSearchParams:
    """Build a SafeSearchParams from a query string, pairs, mapping or sequence."""
    return SafeSearchParams(init)


__all__ = ["SafeSearchParams", "Schema", "safe_search_params"]
