"""
Order-preserving update of a QuerySequence.

Given new raw values for one or more keys, produce a new sequence where:
    - entries for untouched keys stay exactly where they were
    - the Nth original occurrence of an updated key is replaced in place
      by the Nth new value
    - original occurrences beyond the number of new values are dropped
    - new values beyond the number of original occurrences are appended
      at the end, grouped by key in the order the updates were given

All keys are applied in a single walk so that relative order between
different keys' retained entries matches one pass, not several chained
single-key updates.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Mapping, Sequence

from safe_search_params.sequence import Entry, QuerySequence

logger = logging.getLogger(__name__)


def merge_entries(sequence: QuerySequence, updates: Mapping[str, Sequence[str]]) -> QuerySequence:
    """
    Apply ``updates`` (key -> new ordered raw values) to ``sequence``.

    An empty list for a key removes every entry for that key.

    Example:
        tag=first&other=hey&tag=second&tag=third
        merged with {"tag": ["a", "b"]}
        gives tag=a&other=hey&tag=b
    """
    # Private copies; callers' lists are never consumed.
    queues: Dict[str, Deque[str]] = {key: deque(values) for key, values in updates.items()}

    merged: List[Entry] = []
    for key, value in sequence:
        queue = queues.get(key)
        if queue is None:
            merged.append((key, value))
            continue
        if not queue:
            continue
        merged.append((key, queue.popleft()))

    for key, queue in queues.items():
        for value in queue:
            merged.append((key, value))

    logger.debug(
        "Merged %d key(s) into query sequence: %d entries -> %d entries",
        len(queues),
        len(sequence),
        len(merged),
    )
    return QuerySequence(merged)


__all__ = ["merge_entries"]
