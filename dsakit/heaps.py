"""Binary heaps, heap sort, a running median and k-way list merging."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Callable, Iterable
from itertools import count
from typing import Any

from dsakit.linkedlist import Node

__all__ = [
    "MinHeap",
    "BoundedMinHeap",
    "MedianFinder",
    "heap_sort",
    "merge_k_lists",
]

_Before = Callable[[Any, Any], bool]


def _sift_up(items: list[Any], i: int, before: _Before = operator.lt) -> None:
    while i > 0:
        parent = (i - 1) // 2
        if not before(items[i], items[parent]):
            return
        items[i], items[parent] = items[parent], items[i]
        i = parent


def _sift_down(items: list[Any], i: int, size: int, before: _Before = operator.lt) -> None:
    while True:
        best = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < size and before(items[child], items[best]):
                best = child
        if best == i:
            return
        items[i], items[best] = items[best], items[i]
        i = best


class MinHeap:
    """An unbounded binary min-heap."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Add value to the heap."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def top(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("top from an empty heap")
        return self._items[0]

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        value = items.pop()
        _sift_down(items, 0, len(items))
        return value

    def is_empty(self) -> bool:
        """Tell whether the heap holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class BoundedMinHeap:
    """A min-heap of fixed capacity supporting key decrease and deletion by index."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add value; raises OverflowError when the heap is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full")
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def extract_min(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        value = items.pop()
        _sift_down(items, 0, len(items))
        return value

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of range")

    def decrease_key(self, index: int, value: Any) -> None:
        """Lower the value stored at index and restore heap order."""
        self._check_index(index)
        if value > self._items[index]:
            raise ValueError("new value is greater than the current one")
        self._items[index] = value
        _sift_up(self._items, index)

    def delete_key(self, index: int) -> Any:
        """Remove the value stored at index and return it."""
        self._check_index(index)
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            items[index], items[parent] = items[parent], items[index]
            index = parent
        return self.extract_min()

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using an in-place max-heap sort."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, i, n, operator.gt)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end, operator.gt)
    return items


class MedianFinder:
    """Running median kept with a max-heap of the lower half and a min-heap of the upper."""

    def __init__(self) -> None:
        self._low: list[Any] = []
        self._high: list[Any] = []

    def add_num(self, num: Any) -> None:
        """Add a number to the stream."""
        if not self._low or -self._low[0] > num:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low) + 1:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._low and not self._high:
            raise ValueError("no numbers have been added")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return float(self._high[0])


def merge_k_lists(lists: Iterable[Node | None]) -> Node | None:
    """Merge sorted linked lists into one new sorted list; return its head."""
    tiebreak = count()
    heap = [(head.data, next(tiebreak), head) for head in lists if head is not None]
    heapq.heapify(heap)
    dummy = Node(None)
    tail = dummy
    while heap:
        data, _, node = heapq.heappop(heap)
        tail.next = Node(data)
        tail = tail.next
        if node.next is not None:
            heapq.heappush(heap, (node.next.data, next(tiebreak), node.next))
    return dummy.next