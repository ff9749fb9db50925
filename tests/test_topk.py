import random

import pytest

from dsakit.topk import TopKSum


def _expected(items, k):
    return sum(sorted(items)[-k:]) if items else 0


def test_fewer_than_k_values_sum_everything():
    ms = TopKSum(5)
    for value in (4, 9, 2):
        ms.insert(value)
    assert ms.top_k_sum() == 4 + 9 + 2
    assert len(ms) == 3


def test_small_scenario():
    ms = TopKSum(2)
    for value in (5, 1, 3):
        ms.insert(value)
    assert ms.top_k_sum() == 8
    ms.remove(5)
    assert ms.top_k_sum() == _expected([1, 3], 2)


def test_removing_absent_value_changes_nothing():
    ms = TopKSum(2)
    for value in (7, 7, 1):
        ms.insert(value)
    before = ms.top_k_sum()
    ms.remove(42)
    assert ms.top_k_sum() == before
    assert len(ms) == 3


@pytest.mark.parametrize("k", [1, 2, 3, 7])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_operations_match_sorted_oracle(k, seed):
    rng = random.Random(seed)
    ms = TopKSum(k)
    items: list[int] = []
    for _ in range(300):
        if items and rng.random() < 0.4:
            value = rng.choice(items) if rng.random() < 0.8 else rng.randint(-20, 20)
            ms.remove(value)
            if value in items:
                items.remove(value)
        else:
            value = rng.randint(-20, 20)
            ms.insert(value)
            items.append(value)
        assert ms.top_k_sum() == _expected(items, k)
        assert len(ms) == len(items)


def test_non_positive_k_rejected():
    with pytest.raises(ValueError):
        TopKSum(0)