"""Small stateful containers: a bounded-key map, stream statistics and an LRU cache."""

from __future__ import annotations

import heapq
from collections import OrderedDict
from typing import Dict, Iterable, List

MISSING = -1


class DirectAddressMap:
    """Map from integer keys in ``range(capacity)`` to ints; absent keys read as -1."""

    def __init__(self, capacity: int = 1_000_001) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: Dict[int, int] = {}

    def _check(self, key: int) -> None:
        if not 0 <= key < self.capacity:
            raise ValueError(f"key {key} outside 0..{self.capacity - 1}")

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``."""
        self._check(key)
        self._slots[key] = value

    def get(self, key: int) -> int:
        """The value under ``key``, or -1 if none is stored."""
        self._check(key)
        return self._slots.get(key, MISSING)

    def remove(self, key: int) -> None:
        """Forget the value under ``key``."""
        self._check(key)
        self._slots.pop(key, None)


class KthLargest:
    """Tracks the ``k``-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int] = ()) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap: List[int] = []
        for num in nums:
            self.add(num)

    def add(self, value: int) -> int:
        """Add ``value``; return the k-th largest so far (the smallest while fewer than k)."""
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, value)
        elif value > self._heap[0]:
            heapq.heapreplace(self._heap, value)
        return self._heap[0]


class MedianFinder:
    """Running median of a stream of numbers, kept in two heaps."""

    def __init__(self) -> None:
        self._low: List[int] = []  # negated values: a max-heap
        self._high: List[int] = []

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._low or -self._low[0] >= num:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)
        if len(self._low) - len(self._high) > 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) - len(self._low) > 1:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Median of all numbers added so far."""
        if not self._low and not self._high:
            raise ValueError("median of an empty stream")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2.0
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return float(self._high[0])


class LRUCache:
    """Fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: "OrderedDict[int, int]" = OrderedDict()

    def get(self, key: int) -> int:
        """The value under ``key`` (marking it recently used), or -1."""
        if key not in self._data:
            return MISSING
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest keys if over capacity."""
        self._data[key] = value
        self._data.move_to_end(key)
        while len(self._data) > self.capacity:
            self._data.popitem(last=False)