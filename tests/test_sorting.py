import random
from collections import Counter

import pytest

from dsakit import sorting

GENERAL_SORTS = [
    sorting.bubble_sort,
    sorting.optimized_bubble_sort,
    sorting.selection_sort,
    sorting.insertion_sort,
    sorting.merge_sort,
    sorting.counting_sort,
    sorting.cycle_sort,
    sorting.quick_sort_lomuto,
    sorting.quick_sort_hoare,
]

DATASETS = [
    [],
    [7],
    [5, 2, 9, 1, 5, 6],
    list(range(20, 0, -1)),
    list(range(15)),
    [3, -1, 0, -7, 3, 3, 2],
    [4, 4, 4, 4],
    [2, 1, 2, 1],
]


def _random_list(seed, size=60, low=-50, high=50):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


@pytest.mark.parametrize("sort", GENERAL_SORTS)
@pytest.mark.parametrize("data", DATASETS)
def test_general_sorts_match_sorted(sort, data):
    original = list(data)
    result = sort(data)
    assert result == sorted(original)
    assert result == sorting.insertion_sort(original)
    assert data == original


@pytest.mark.parametrize("sort", GENERAL_SORTS)
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_general_sorts_random(sort, seed):
    data = _random_list(seed)
    result = sort(data)
    assert result == sorted(data)
    assert result == sorting.merge_sort(data)


@pytest.mark.parametrize("seed", [4, 5])
def test_radix_sort_random(seed):
    data = _random_list(seed, low=0, high=100000)
    assert sorting.radix_sort(data) == sorted(data)


@pytest.mark.parametrize("data", [[10, 5], [100, 1, 10], [0, 0, 0], [], [9]])
def test_radix_sort_powers_of_ten(data):
    assert sorting.radix_sort(data) == sorted(data)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        sorting.radix_sort([3, -1, 2])


def test_cycle_sort_distinct_sorts():
    data = _random_list(6)
    distinct = list(dict.fromkeys(data))
    assert sorting.cycle_sort_distinct(distinct) == sorted(distinct)


def test_cycle_sort_distinct_rejects_duplicates():
    with pytest.raises(ValueError):
        sorting.cycle_sort_distinct([1, 2, 2])


def test_count_inversions_source_example():
    assert sorting.count_inversions([1, 2, 5, 4]) == 1


def test_count_inversions_sorted_is_zero():
    assert sorting.count_inversions(list(range(30))) == 0


def test_count_inversions_reversed_is_all_pairs():
    n = 12
    assert sorting.count_inversions(list(range(n, 0, -1))) == n * (n - 1) // 2


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_count_inversions_complement(seed):
    data = list(dict.fromkeys(_random_list(seed, size=40, low=0, high=1000)))
    n = len(data)
    forward = sorting.count_inversions(data)
    backward = sorting.count_inversions(list(reversed(data)))
    assert forward + backward == n * (n - 1) // 2


@pytest.mark.parametrize("seed", [10, 11])
@pytest.mark.parametrize("bucket_count", [1, 3, 7])
def test_bucket_sort_buckets(seed, bucket_count):
    data = _random_list(seed, low=0, high=99)
    buckets = sorting.bucket_sort(data, bucket_count)
    assert len(buckets) == bucket_count
    flattened = [x for bucket in buckets for x in bucket]
    assert flattened == sorted(data)
    for bucket in buckets:
        assert bucket == sorted(bucket)


def test_bucket_sort_rejects_zero_buckets():
    with pytest.raises(ValueError):
        sorting.bucket_sort([1, 2], 0)


def test_naive_partition():
    data = [9, 4, 7, 1, 8, 3, 7]
    original = Counter(data)
    pivot_value = data[2]
    idx = sorting.naive_partition(data, 0, len(data) - 1, 2)
    assert data[idx] == pivot_value
    assert all(x <= pivot_value for x in data[:idx])
    assert all(x > pivot_value for x in data[idx + 1:])
    assert Counter(data) == original


def test_naive_partition_subrange_untouched():
    data = [100, 5, 2, 8, -100]
    idx = sorting.naive_partition(data, 1, 3, 3)
    assert data[0] == 100 and data[4] == -100
    assert data[idx] == 8
    assert sorted(data[1:4]) == [2, 5, 8]


def test_naive_partition_pivot_out_of_range():
    with pytest.raises(ValueError):
        sorting.naive_partition([1, 2, 3], 0, 1, 2)


@pytest.mark.parametrize("seed", [12, 13, 14])
def test_lomuto_partition(seed):
    data = _random_list(seed, size=25)
    original = Counter(data)
    pivot_value = data[-1]
    idx = sorting.lomuto_partition(data, 0, len(data) - 1)
    assert data[idx] == pivot_value
    assert all(x < pivot_value for x in data[:idx])
    assert all(x >= pivot_value for x in data[idx + 1:])
    assert Counter(data) == original


@pytest.mark.parametrize("seed", [15, 16, 17])
def test_hoare_partition(seed):
    data = _random_list(seed, size=25)
    original = Counter(data)
    j = sorting.hoare_partition(data, 0, len(data) - 1)
    assert 0 <= j < len(data) - 1
    assert max(data[: j + 1]) <= min(data[j + 1:])
    assert Counter(data) == original