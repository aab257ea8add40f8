"""Problems solved with heaps: running median and the k largest values."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class MedianFinder:
    """Keeps the median of a stream of numbers with two heaps."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # max-heap stored negated
        self._upper: list[int] = []  # min-heap

    def add_num(self, num: int) -> None:
        heapq.heappush(self._lower, -num)
        heapq.heappush(self._upper, -heapq.heappop(self._lower))
        if len(self._lower) < len(self._upper):
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def find_median(self) -> float:
        """Return the median of all numbers added so far."""
        if not self._lower:
            raise ValueError("no numbers have been added")
        if len(self._lower) == len(self._upper):
            return (-self._lower[0] + self._upper[0]) / 2
        return float(-self._lower[0])

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)


def k_largest(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` largest values, largest first."""
    if k < 0:
        raise ValueError("k must not be negative")
    heap: list[int] = []
    for num in nums:
        heapq.heappush(heap, num)
        if len(heap) > k:
            heapq.heappop(heap)
    return sorted(heap, reverse=True)