"""Merge sort and Hoare-partition quick sort on list ranges."""

from __future__ import annotations

import random
from enum import Enum


class PivotStrategy(str, Enum):
    """How quick sort chooses its pivot value."""

    LOW = "low"
    MEDIAN = "median"
    RANDOM = "random"


def _strategy(pivot: PivotStrategy | str) -> PivotStrategy:
    try:
        return PivotStrategy(pivot)
    except ValueError:
        return PivotStrategy.RANDOM


def merge(values: list[int], start: int, mid: int, end: int) -> None:
    """Merge the sorted runs ``values[start:mid+1]`` and ``values[mid+1:end+1]``."""
    left = values[start : mid + 1]
    right = values[mid + 1 : end + 1]
    li = ri = 0
    index = start
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            values[index] = left[li]
            li += 1
        else:
            values[index] = right[ri]
            ri += 1
        index += 1
    rest = left[li:] + right[ri:]
    values[index : index + len(rest)] = rest


def merge_sort(values: list[int], start: int = 0, end: int | None = None) -> list[int]:
    """Sort ``values[start:end+1]`` in place and return ``values``."""
    if end is None:
        end = len(values) - 1
    if start >= end:
        return values
    mid = (start + end) // 2
    merge_sort(values, start, mid)
    merge_sort(values, mid + 1, end)
    merge(values, start, mid, end)
    return values


def _pivot_value(
    values: list[int], low: int, high: int, strategy: PivotStrategy, rng: random.Random
) -> int:
    if strategy is PivotStrategy.LOW:
        return values[low]
    if strategy is PivotStrategy.MEDIAN:
        begin, end = values[low], values[high]
        mid = values[(low + high) // 2]
        if (begin <= mid <= end) or (mid >= end and mid <= begin):
            return mid
        if (mid <= begin <= end) or (mid >= end and begin >= end):
            return begin
        return end
    return values[rng.randrange(low, high + 1)]


def partition(
    values: list[int],
    low: int,
    high: int,
    pivot: PivotStrategy | str = PivotStrategy.RANDOM,
    rng: random.Random | None = None,
) -> int:
    """Hoare-partition ``values[low:high+1]`` and return the split index.

    Afterwards every element in ``low..q`` is no greater than any element in
    ``q+1..high``. Unknown strategy names choose a random pivot.
    """
    rng = rng if rng is not None else random.Random()
    value = _pivot_value(values, low, high, _strategy(pivot), rng)
    i, j = low - 1, high + 1
    while True:
        j -= 1
        while values[j] > value:
            j -= 1
        i += 1
        while values[i] < value:
            i += 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def quick_sort(
    values: list[int],
    low: int = 0,
    high: int | None = None,
    pivot: PivotStrategy | str = PivotStrategy.RANDOM,
    rng: random.Random | None = None,
) -> None:
    """Sort ``values[low:high+1]`` in place using Hoare partitioning."""
    if high is None:
        high = len(values) - 1
    rng = rng if rng is not None else random.Random()
    pending = [(low, high)]
    while pending:
        left, right = pending.pop()
        if left < right:
            q = partition(values, left, right, pivot, rng)
            pending.append((q + 1, right))
            pending.append((left, q))