"""Subset counting and maximum window sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = ["count_subsets_with_sum", "max_window_sum", "max_sum_up_to_k"]


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Count subsets (the empty one included) whose elements add up to target."""
    ways: Counter[int] = Counter({0: 1})
    for value in values:
        extended = Counter(ways)
        for total, number in ways.items():
            extended[total + value] += number
        ways = extended
    return ways[target]


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of k consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError("k must lie between 1 and the number of values")
    current = sum(values[:k])
    best = current
    for outgoing, incoming in zip(values, values[k:]):
        current += incoming - outgoing
        best = max(best, current)
    return best


def max_sum_up_to_k(values: Sequence[int], k: int) -> int:
    """Return the largest sum of at most k consecutive values, never below 0."""
    if not 1 <= k <= len(values):
        raise ValueError("k must lie between 1 and the number of values")
    return max(0, *(max_window_sum(values, size) for size in range(1, k + 1)))