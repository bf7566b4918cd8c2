"""Binary max-heap and min-heap operations on plain lists, and heap sort."""

from __future__ import annotations

import operator
from collections.abc import Callable

_Compare = Callable[[int, int], bool]


def format_values(values: list[int]) -> str:
    """Return the values separated by single spaces."""
    return " ".join(str(v) for v in values)


def _sift_down(values: list[int], index: int, size: int | None, before: _Compare) -> None:
    # ``before(a, b)`` is true when ``a`` belongs above ``b`` in the heap.
    if size is None:
        size = len(values)
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        best = index
        if left < size and before(values[left], values[best]):
            best = left
        if right < size and before(values[right], values[best]):
            best = right
        if best == index:
            return
        values[index], values[best] = values[best], values[index]
        index = best


def max_heapify(values: list[int], index: int, size: int | None = None) -> None:
    """Sift ``values[index]`` down within the first ``size`` elements of a max-heap."""
    _sift_down(values, index, size, operator.gt)


def min_heapify(values: list[int], index: int, size: int | None = None) -> None:
    """Sift ``values[index]`` down within the first ``size`` elements of a min-heap."""
    _sift_down(values, index, size, operator.lt)


def build_max_heap(values: list[int]) -> None:
    """Rearrange ``values`` into a max-heap."""
    for index in range(len(values) // 2 - 1, -1, -1):
        max_heapify(values, index)


def build_min_heap(values: list[int]) -> None:
    """Rearrange ``values`` into a min-heap."""
    for index in range(len(values) // 2 - 1, -1, -1):
        min_heapify(values, index)


def _insert(values: list[int], value: int, heapify: Callable[[list[int], int], None]) -> None:
    values.append(value)
    for index in range((len(values) - 1) // 2 - 1, -1, -1):
        heapify(values, index)


def insert_max(values: list[int], value: int) -> None:
    """Append ``value`` and re-heapify the upper levels of a max-heap."""
    _insert(values, value, max_heapify)


def insert_min(values: list[int], value: int) -> None:
    """Append ``value`` and re-heapify the upper levels of a min-heap."""
    _insert(values, value, min_heapify)


def _modify(values: list[int], position: int, value: int, before: _Compare) -> None:
    if not 1 <= position <= len(values):
        raise IndexError(f"heap position {position} out of range")
    values[position - 1] = value
    for index in range(len(values) - 1, 0, -1):
        parent = (index - 1) // 2
        if before(values[index], values[parent]):
            values[index], values[parent] = values[parent], values[index]


def modify_max(values: list[int], position: int, value: int) -> None:
    """Set the element at 1-based ``position`` and bubble larger values upwards.

    Raises IndexError when ``position`` is outside ``1..len(values)``.
    """
    _modify(values, position, value, operator.gt)


def modify_min(values: list[int], position: int, value: int) -> None:
    """Set the element at 1-based ``position`` and bubble smaller values upwards.

    Raises IndexError when ``position`` is outside ``1..len(values)``.
    """
    _modify(values, position, value, operator.lt)


def _extract(
    values: list[int],
    build: Callable[[list[int]], None],
    heapify: Callable[[list[int], int], None],
) -> int:
    if not values:
        raise IndexError("extract from an empty heap")
    build(values)
    top = values[0]
    last = values.pop()
    if values:
        values[0] = last
        heapify(values, 0)
    return top


def extract_maximum(values: list[int]) -> int:
    """Heapify ``values``, remove its largest element and return it.

    Raises IndexError for an empty list.
    """
    return _extract(values, build_max_heap, max_heapify)


def extract_minimum(values: list[int]) -> int:
    """Heapify ``values``, remove its smallest element and return it.

    Raises IndexError for an empty list.
    """
    return _extract(values, build_min_heap, min_heapify)


def ascending_heap_sort(values: list[int]) -> None:
    """Sort ``values`` in place into ascending order."""
    build_max_heap(values)
    for end in range(len(values) - 1, -1, -1):
        values[end], values[0] = values[0], values[end]
        max_heapify(values, 0, end)


def descending_heap_sort(values: list[int]) -> None:
    """Sort ``values`` in place into descending order."""
    build_min_heap(values)
    for end in range(len(values) - 1, -1, -1):
        values[end], values[0] = values[0], values[end]
        min_heapify(values, 0, end)