"""
Ordered Query Sequence - the raw (key, value) pairs behind one facade.

Duplicate keys are allowed and entry order is significant. A sequence never
changes once built; every "mutation" returns a new QuerySequence.

Percent-encoding is delegated to ``urllib.parse`` (form encoding: spaces
become ``+``, blank values are kept).
"""

import warnings
from typing import Iterable, Iterator, List, Mapping, Tuple, Union
from urllib.parse import parse_qsl, urlencode

SEPARATOR = "&"
ENCODING = "utf-8"

Entry = Tuple[str, str]

QueryInit = Union[str, Iterable[Tuple[str, str]], Mapping[str, str], "QuerySequence", None]


def parse_query_string(query: str) -> List[Entry]:
    """
    Decode a query string into ordered (key, value) pairs.

    A single leading ``?`` is ignored. ``a`` and ``a=`` both decode to
    ``("a", "")``. Malformed text never raises.
    """
    if query.startswith("?"):
        query = query[1:]
    if not query:
        return []
    return parse_qsl(query, keep_blank_values=True, encoding=ENCODING, separator=SEPARATOR)


def build_query_string(entries: Iterable[Entry]) -> str:
    """Encode (key, value) pairs in order, without a leading ``?``."""
    return urlencode(list(entries), encoding=ENCODING)


def _entries_from_pairs(pairs: Iterable) -> List[Entry]:
    entries: List[Entry] = []
    for pair in pairs:
        if isinstance(pair, (str, bytes)):
            warnings.warn(f"Skipping query pair given as a string: {pair!r}", UserWarning)
            continue
        pair = tuple(pair)
        if len(pair) != 2:
            warnings.warn(f"Skipping query pair with {len(pair)} element(s): {pair!r}", UserWarning)
            continue
        key, value = pair
        entries.append((str(key), str(value)))
    return entries


def _normalize(init: QueryInit) -> Tuple[Entry, ...]:
    if init is None:
        return ()
    if isinstance(init, QuerySequence):
        return init.entries
    if isinstance(init, str):
        return tuple(parse_query_string(init))
    if isinstance(init, Mapping):
        return tuple((str(key), str(value)) for key, value in init.items())
    if isinstance(init, (bytes, bytearray)):
        raise TypeError("QuerySequence does not accept bytes; decode the query string first")
    try:
        pairs = iter(init)
    except TypeError:
        raise TypeError(f"Cannot build a QuerySequence from {type(init).__name__}")
    return tuple(_entries_from_pairs(pairs))


class QuerySequence:
    """
    Immutable ordered multi-map of query parameters.

    Accepts a query string, a list of ``(key, value)`` pairs, a flat
    mapping, or another QuerySequence. All four normalize to the same
    tuple of pairs.
    """

    __slots__ = ("_entries",)

    def __init__(self, init: QueryInit = None) -> None:
        self._entries: Tuple[Entry, ...] = _normalize(init)

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def get_all(self, key: str) -> List[str]:
        """All values for key in sequence order, empty if absent."""
        return [v for k, v in self._entries if k == key]

    def keys(self) -> List[str]:
        """Distinct keys in first-seen order."""
        return list(dict.fromkeys(k for k, _ in self._entries))

    def to_string(self) -> str:
        return build_query_string(self._entries)

    def sorted(self) -> "QuerySequence":
        """Stable sort by key; values sharing a key keep their relative order."""
        return QuerySequence(sorted(self._entries, key=lambda entry: entry[0]))

    def without(self, key: str) -> "QuerySequence":
        return QuerySequence([(k, v) for k, v in self._entries if k != key])

    def with_appended(self, key: str, values: Iterable[str]) -> "QuerySequence":
        return QuerySequence(list(self._entries) + [(key, v) for v in values])

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QuerySequence):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"QuerySequence({list(self._entries)!r})"


__all__ = [
    "SEPARATOR",
    "ENCODING",
    "Entry",
    "QuerySequence",
    "parse_query_string",
    "build_query_string",
]
