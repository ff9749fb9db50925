"""Problems solved with hash maps, counters and sets."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import TypeVar

__all__ = ["group_anagrams", "k_closest", "geometric_triplets", "min_bars"]

P = TypeVar("P", bound=Sequence[int])


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group lowercase words that are anagrams of one another.

    Groups are ordered by their letter-count signature (counts of 'a'..'z'
    compared lexicographically); words keep their input order within a group.
    """
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in words:
        counts = [0] * 26
        for ch in word:
            index = ord(ch) - ord("a")
            if not 0 <= index < 26:
                raise ValueError(f"unsupported character {ch!r} in {word!r}")
            counts[index] += 1
        groups.setdefault(tuple(counts), []).append(word)
    return [groups[key] for key in sorted(groups)]


def _squared_distance(point: Sequence[int]) -> int:
    return point[0] * point[0] + point[1] * point[1]


def k_closest(points: Iterable[P], k: int) -> list[P]:
    """Return the k points nearest the origin, farthest of them first."""
    items = list(points)
    if not 0 <= k <= len(items):
        raise ValueError("k must lie between 0 and the number of points")
    nearest = heapq.nsmallest(k, items, key=_squared_distance)
    return nearest[::-1]


def geometric_triplets(values: Iterable[int], ratio: int) -> int:
    """Count index triples i < j < k where the values form a geometric progression."""
    if ratio == 0:
        raise ValueError("ratio must be non-zero")
    items = list(values)
    if len(items) < 3:
        return 0
    right = Counter(items)
    left: Counter[int] = Counter()
    right[items[0]] -= 1
    left[items[0]] += 1
    total = 0
    for value in items[1:-1]:
        right[value] -= 1
        if value % ratio == 0:
            total += right[value * ratio] * left[value // ratio]
        left[value] += 1
    return total


def min_bars(text: str, words: Iterable[str]) -> int:
    """Return the fewest bars that split text into words from the given list.

    Raises ValueError when text cannot be split into those words.
    """
    if not text:
        return 0
    vocabulary = set(words)
    n = len(text)
    pieces: list[int | None] = [None] * (n + 1)
    pieces[n] = 0
    for start in reversed(range(n)):
        pieces[start] = min(
            (
                1 + rest
                for end, rest in enumerate(pieces[start + 1:], start + 1)
                if rest is not None and text[start:end] in vocabulary
            ),
            default=None,
        )
    best = pieces[0]
    if best is None:
        raise ValueError("text cannot be split into the given words")
    return best - 1