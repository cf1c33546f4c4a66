"""Small stateful data structures."""

from __future__ import annotations

import heapq
from collections import defaultdict


class ProductOfNumbers:
    """A stream of integers answering products of the last ``k`` items."""

    def __init__(self) -> None:
        self._prefix: list[int] = []

    def add(self, num: int) -> None:
        """Append ``num`` to the stream."""
        if num == 0:
            self._prefix.clear()
        else:
            last = self._prefix[-1] if self._prefix else 1
            self._prefix.append(last * num)

    def get_product(self, k: int) -> int:
        """Product of the last ``k`` numbers added."""
        if k < 1:
            raise ValueError("k must be at least 1")
        size = len(self._prefix)
        if size < k:
            return 0
        if size == k:
            return self._prefix[-1]
        return self._prefix[-1] // self._prefix[-k - 1]


class NumberContainers:
    """Indexed slots holding numbers, finding the smallest index of a number."""

    def __init__(self) -> None:
        self._indexes: defaultdict[int, list[int]] = defaultdict(list)
        self._numbers: dict[int, int] = {}

    def change(self, index: int, number: int) -> None:
        """Put ``number`` at ``index``, replacing what was there."""
        if self._numbers.get(index) == number:
            return
        self._numbers[index] = number
        heapq.heappush(self._indexes[number], index)

    def find(self, number: int) -> int:
        """Smallest index holding ``number``, or -1 if none does."""
        heap = self._indexes.get(number)
        if not heap:
            return -1
        while heap and self._numbers.get(heap[0]) != number:
            heapq.heappop(heap)
        return heap[0] if heap else -1