"""Priority queue of search node handles ordered by estimated total cost."""

from __future__ import annotations

import heapq
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class FrontierEntry:
    """Queued node: ``priority`` is ``moves + manhattan``.

    Field order is the sort order: priority, then handle (insertion order),
    then moves. Handles are unique within an engine, so no two distinct
    entries compare equal.
    """

    priority: int
    handle: int
    moves: int


class Frontier:
    """Min-heap of :class:`FrontierEntry` built on :mod:`heapq`."""

    def __init__(self) -> None:
        self._heap: list[FrontierEntry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, entry: FrontierEntry) -> None:
        heapq.heappush(self._heap, entry)

    def pop(self) -> FrontierEntry:
        """Remove and return the lowest entry. Raises IndexError when empty."""
        return heapq.heappop(self._heap)

    def peek(self) -> FrontierEntry:
        return self._heap[0]
