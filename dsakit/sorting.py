"""Classic sorting algorithms, partition schemes and inversion counting."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from itertools import accumulate
from typing import Any

__all__ = [
    "bubble_sort",
    "optimized_bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "count_inversions",
    "counting_sort",
    "radix_sort",
    "cycle_sort",
    "cycle_sort_distinct",
    "bucket_sort",
    "naive_partition",
    "lomuto_partition",
    "hoare_partition",
    "quick_sort_lomuto",
    "quick_sort_hoare",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using plain bubble sort."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def optimized_bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy; stops as soon as a pass makes no swap."""
    items = list(values)
    n = len(items)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[Any], right: list[Any]) -> tuple[list[Any], int]:
    merged: list[Any] = []
    i = j = inversions = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return list(items), 0
    half = len(items) // 2
    left, left_count = _sort_and_count(items[:half])
    right, right_count = _sort_and_count(items[half:])
    merged, split_count = _merge(left, right)
    return merged, left_count + right_count + split_count


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using a stable top-down merge sort."""
    return _sort_and_count(list(values))[0]


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values))[1]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of integers using a stable counting sort."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        positions[value - low] -= 1
        result[positions[value - low]] = value
    return result


def _digit_pass(items: list[int], exp: int) -> list[int]:
    counts = [0] * 10
    for value in items:
        counts[(value // exp) % 10] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        digit = (value // exp) % 10
        positions[digit] -= 1
        result[positions[digit]] = value
    return result


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers using LSD radix sort."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return []
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _digit_pass(items, exp)
        exp *= 10
    return items


def _rank(items: list[Any], start: int, item: Any) -> int:
    return start + sum(1 for other in items[start + 1:] if other < item)


def cycle_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using cycle sort; duplicates are allowed."""
    items = list(values)
    for start in range(len(items) - 1):
        item = items[start]
        pos = _rank(items, start, item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = _rank(items, start, item)
            while item == items[pos]:
                pos += 1
            items[pos], item = item, items[pos]
    return items


def cycle_sort_distinct(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using cycle sort on pairwise distinct values."""
    items = list(values)
    if len(set(items)) != len(items):
        raise ValueError("values must be distinct")
    for start in range(len(items) - 1):
        item = items[start]
        pos = _rank(items, start, item)
        items[pos], item = item, items[pos]
        while pos != start:
            pos = _rank(items, start, item)
            items[pos], item = item, items[pos]
    return items


def bucket_sort(values: Iterable[int], bucket_count: int) -> list[list[int]]:
    """Distribute integers into equal-width buckets and sort each bucket.

    Returns the buckets in order; concatenated they form the sorted input.
    """
    if bucket_count < 1:
        raise ValueError("bucket_count must be positive")
    items = list(values)
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    if not items:
        return buckets
    low, high = min(items), max(items)
    width = max(1, (high - low + 1) // bucket_count)
    for value in items:
        index = min((value - low) // width, bucket_count - 1)
        buckets[index].append(value)
    for bucket in buckets:
        bucket.sort()
    return buckets


def naive_partition(values: MutableSequence[Any], low: int, high: int, pivot: int) -> int:
    """Partition values[low..high] around values[pivot] in place.

    Elements not greater than the pivot come first, then the pivot, then the
    larger ones. Returns the pivot's final index.
    """
    if not low <= pivot <= high:
        raise ValueError("pivot must lie within [low, high]")
    pivot_value = values[pivot]
    segment = list(values[low:high + 1])
    smaller = [x for i, x in enumerate(segment, low) if x <= pivot_value and i != pivot]
    larger = [x for x in segment if x > pivot_value]
    values[low:high + 1] = smaller + [pivot_value] + larger
    return low + len(smaller)


def lomuto_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition values[low..high] around its last element; return the pivot index."""
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def hoare_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition values[low..high] around its first element.

    Returns j such that every element in [low, j] is not greater than any
    element in [j + 1, high].
    """
    pivot = values[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def quick_sort_lomuto(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with Lomuto partitioning."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = lomuto_partition(items, low, high)
            pending.append((low, p - 1))
            pending.append((p + 1, high))
    return items


def quick_sort_hoare(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with Hoare partitioning."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = hoare_partition(items, low, high)
            pending.append((low, p))
            pending.append((p + 1, high))
    return items