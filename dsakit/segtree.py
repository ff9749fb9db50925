"""A segment tree answering range-sum queries with point assignment."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["SumSegmentTree"]


class SumSegmentTree:
    """Range sums over a fixed-length sequence of numbers."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._tree = [0] * (4 * self._n)
        self._build(items, 0, self._n - 1, 0)

    def __len__(self) -> int:
        return self._n

    def _build(self, items: list[int], start: int, end: int, node: int) -> None:
        if start == end:
            self._tree[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, start, mid, 2 * node + 1)
        self._build(items, mid + 1, end, 2 * node + 2)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _query(self, start: int, end: int, left: int, right: int, node: int) -> int:
        if start > right or end < left:
            return 0
        if left <= start and end <= right:
            return self._tree[node]
        mid = (start + end) // 2
        return self._query(start, mid, left, right, 2 * node + 1) + self._query(
            mid + 1, end, left, right, 2 * node + 2
        )

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is out of range")

    def query(self, left: int, right: int) -> int:
        """Return the sum of values[left..right], both ends included; 0 if left > right."""
        self._check(left)
        self._check(right)
        if left > right:
            return 0
        return self._query(0, self._n - 1, left, right, 0)

    def update(self, index: int, value: int) -> None:
        """Set values[index] to value."""
        self._check(index)
        start, end, node = 0, self._n - 1, 0
        path = []
        while start != end:
            path.append(node)
            mid = (start + end) // 2
            if index <= mid:
                end, node = mid, 2 * node + 1
            else:
                start, node = mid + 1, 2 * node + 2
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = self._tree[2 * parent + 1] + self._tree[2 * parent + 2]