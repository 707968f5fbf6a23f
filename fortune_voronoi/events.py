"""Event queue and tombstone bookkeeping for the sweep."""

from __future__ import annotations

import heapq
import itertools
from typing import List, Tuple

from .types import EmptyQueueError, Event


class EventQueue:
    """Min-priority queue of events keyed by their sweep coordinate.

    Events with equal ``y`` pop in increasing ``x`` and then in insertion
    order, so a sweep over the same input is reproducible.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, float, int, Event]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, event: Event) -> None:
        heapq.heappush(self._heap, (event.y, event.point.x, next(self._counter), event))

    def pop(self) -> Event:
        if not self._heap:
            raise EmptyQueueError("pop from an empty event queue")
        return heapq.heappop(self._heap)[-1]

    def clear(self) -> None:
        self._heap.clear()
        self._counter = itertools.count()


class TombstoneList:
    """Circle events invalidated before they were reached by the sweep.

    Membership is by identity; two events at the same place are different
    events.
    """

    def __init__(self) -> None:
        self._items: List[Event] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, event: object) -> bool:
        return self.find(event) != -1

    def find(self, event: object) -> int:
        for idx, item in enumerate(self._items):
            if item is event:
                return idx
        return -1

    def append(self, event: Event) -> None:
        self._items.append(event)

    def remove(self, event: Event) -> bool:
        idx = self.find(event)
        if idx == -1:
            return False
        del self._items[idx]
        return True

    def clear(self) -> None:
        self._items.clear()


__all__ = ["EventQueue", "TombstoneList"]
