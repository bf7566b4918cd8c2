"""Generators for the input lists the benchmark sorts."""

from __future__ import annotations

import random
from enum import Enum


class ArrayKind(str, Enum):
    """Shapes of input data a benchmark run can use."""

    RANDOM = "random"
    REVERSE = "reverse"
    SORTED = "sorted"
    HALF_SORTED = "half sorted"


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_array(size: int, value_range: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers drawn from ``0..value_range`` inclusive."""
    rng = _rng_or_default(rng)
    return [rng.randint(0, value_range) for _ in range(size)]


def half_sorted_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Return a list whose first half is ``0, 1, ...`` and whose second half is random.

    The random half holds values in ``size..2*size``, so every value there is
    at least as large as everything in the sorted half.
    """
    rng = _rng_or_default(rng)
    mid = size // 2
    head = list(range(mid))
    tail = [rng.randint(0, size) + size for _ in range(size - mid)]
    return head + tail


def sorted_array(size: int) -> list[int]:
    """Return ``0, 1, ..., size - 1``."""
    return list(range(size))


def reverse_array(size: int) -> list[int]:
    """Return ``size - 1, ..., 1, 0``."""
    return list(range(size - 1, -1, -1))


def make_array(
    kind: ArrayKind | str,
    size: int,
    value_range: int = 1000,
    rng: random.Random | None = None,
) -> list[int]:
    """Build an input list of the given kind.

    Raises ValueError when ``kind`` names no known shape.
    """
    kind = ArrayKind(kind)
    if kind is ArrayKind.RANDOM:
        return random_array(size, value_range, rng)
    if kind is ArrayKind.REVERSE:
        return reverse_array(size)
    if kind is ArrayKind.SORTED:
        return sorted_array(size)
    return half_sorted_array(size, rng)