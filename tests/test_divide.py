import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.divide import PivotStrategy, merge, merge_sort, partition, quick_sort

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=80)


def test_merge_two_runs():
    data = [1, 4, 9, 2, 3, 10]
    merge(data, 0, 2, 5)
    assert data == sorted([1, 4, 9, 2, 3, 10])


def test_merge_leaves_outside_untouched():
    data = [99, 5, 7, 1, 6, -3]
    merge(data, 1, 2, 4)
    assert data[0] == 99
    assert data[5] == -3
    assert data[1:5] == sorted([5, 7, 1, 6])


@given(int_lists)
def test_merge_sort_sorts(values):
    data = list(values)
    result = merge_sort(data)
    assert result is data
    assert data == sorted(values)


def test_merge_sort_subrange():
    data = [9, 8, 7, 6, 5, 4]
    merge_sort(data, 1, 4)
    assert data == [9] + sorted([8, 7, 6, 5]) + [4]


@pytest.mark.parametrize("strategy", list(PivotStrategy))
@given(values=int_lists)
def test_quick_sort_sorts(strategy, values):
    data = list(values)
    quick_sort(data, pivot=strategy, rng=random.Random(5))
    assert data == sorted(values)


@given(values=int_lists)
def test_quick_sort_unknown_strategy_is_random(values):
    data = list(values)
    quick_sort(data, pivot="none", rng=random.Random(1))
    assert data == sorted(values)


def test_quick_sort_sorted_and_reversed_median():
    ascending = list(range(2000))
    descending = list(reversed(ascending))
    quick_sort(descending, pivot="median")
    assert descending == ascending


def test_quick_sort_subrange():
    data = [50, 3, 2, 1, -50]
    quick_sort(data, 1, 3, PivotStrategy.LOW)
    assert data == [50, 1, 2, 3, -50]


@pytest.mark.parametrize("strategy", [PivotStrategy.LOW, PivotStrategy.MEDIAN])
@given(values=st.lists(st.integers(-100, 100), min_size=2, max_size=50))
def test_partition_splits_range(strategy, values):
    data = list(values)
    q = partition(data, 0, len(data) - 1, strategy)
    assert 0 <= q < len(data) - 1
    assert max(data[: q + 1]) <= min(data[q + 1 :])
    assert sorted(data) == sorted(values)


@given(values=st.lists(st.integers(-100, 100), min_size=2, max_size=50))
def test_partition_random_keeps_order_property(values):
    data = list(values)
    q = partition(data, 0, len(data) - 1, PivotStrategy.RANDOM, random.Random(11))
    assert 0 <= q <= len(data) - 1
    if q < len(data) - 1:
        assert max(data[: q + 1]) <= min(data[q + 1 :])
    assert sorted(data) == sorted(values)