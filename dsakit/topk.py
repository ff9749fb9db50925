"""A multiset that keeps the sum of its k largest elements up to date."""

from __future__ import annotations

from sortedcontainers import SortedList

__all__ = ["TopKSum"]


class TopKSum:
    """Multiset of numbers tracking the sum of its k largest members."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("k must be positive")
        self.k = k
        self._top: SortedList = SortedList()
        self._rest: SortedList = SortedList()
        self._sum = 0

    def insert(self, value: int) -> None:
        """Add one copy of value."""
        if len(self._top) < self.k:
            self._top.add(value)
            self._sum += value
            return
        smallest = self._top[0]
        if value > smallest:
            self._top.remove(smallest)
            self._rest.add(smallest)
            self._top.add(value)
            self._sum += value - smallest
        else:
            self._rest.add(value)

    def remove(self, value: int) -> None:
        """Remove one copy of value; values not present are ignored."""
        if value in self._top:
            self._top.remove(value)
            self._sum -= value
            if self._rest:
                promoted = self._rest.pop()
                self._top.add(promoted)
                self._sum += promoted
        elif value in self._rest:
            self._rest.remove(value)

    def top_k_sum(self) -> int:
        """Return the sum of the k largest values held."""
        return self._sum

    def __len__(self) -> int:
        return len(self._top) + len(self._rest)