"""Quadratic comparison sorts and the two integer distribution sorts.

Every function sorts the given list in place.
"""

from __future__ import annotations

from collections import deque


def bubble_sort(values: list[int]) -> None:
    """Bubble sort performing ``len(values) - 2`` passes over the list.

    After the passes the largest ``len(values) - 2`` elements are in their
    final places; the first two positions are left as the last pass put them.
    """
    last = len(values) - 1
    for _ in range(max(0, last - 1)):
        for j in range(last):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def insertion_sort(values: list[int]) -> None:
    """Sort by swapping each element leftwards into place."""
    for i in range(1, len(values)):
        j = i - 1
        while j >= 0 and values[j] > values[j + 1]:
            values[j], values[j + 1] = values[j + 1], values[j]
            j -= 1


def selection_sort(values: list[int]) -> None:
    """Sort by repeatedly moving the smallest remaining element forward.

    Raises ValueError for an empty list.
    """
    if not values:
        raise ValueError("cannot sort an empty list")
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def _check_distribution_input(values: list[int]) -> None:
    if not values:
        raise ValueError("cannot sort an empty list")
    if min(values) < 0:
        raise ValueError("only non-negative integers can be sorted")


def counting_sort(values: list[int]) -> None:
    """Stable counting sort of non-negative integers.

    Raises ValueError for an empty list or a negative value.
    """
    _check_distribution_input(values)
    counts = [0] * (max(values) + 1)
    for v in values:
        counts[v] += 1
    running = 0
    for index, count in enumerate(counts):
        running += count
        counts[index] = running
    output = [0] * len(values)
    for v in reversed(values):
        counts[v] -= 1
        output[counts[v]] = v
    values[:] = output


def radix_sort(values: list[int]) -> None:
    """Least-significant-digit radix sort in base ten.

    Raises ValueError for an empty list or a negative value.
    """
    _check_distribution_input(values)
    buckets: list[deque[int]] = [deque() for _ in range(10)]
    divisor = 1
    for _ in range(len(str(max(values)))):
        for v in values:
            buckets[(v // divisor) % 10].append(v)
        divisor *= 10
        values[:] = [v for bucket in buckets for v in bucket]
        for bucket in buckets:
            bucket.clear()