"""Timing of every sorting algorithm on generated input lists."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from sortbench.arrays import ArrayKind, make_array
from sortbench.divide import PivotStrategy, merge_sort, quick_sort
from sortbench.heap import ascending_heap_sort, build_max_heap
from sortbench.simple import (
    bubble_sort,
    counting_sort,
    insertion_sort,
    radix_sort,
    selection_sort,
)

DEFAULT_SIZES = (100, 1_000, 10_000, 100_000, 250_000, 1_000_000)
DEFAULT_RANGE = 1_000
DEFAULT_REPEATS = 3
_RULE = "=" * 43

Sorter = Callable[[list[int]], None]


@dataclass(frozen=True)
class Timing:
    """CPU time one algorithm took on one run."""

    name: str
    seconds: float


def _merge(values: list[int]) -> None:
    merge_sort(values, 0, len(values) - 1)


def _quick(values: list[int]) -> None:
    quick_sort(values, 0, len(values) - 1, PivotStrategy.MEDIAN)


def _heap(values: list[int]) -> None:
    build_max_heap(values)
    ascending_heap_sort(values)


def algorithms() -> list[tuple[str, Sorter]]:
    """Return the benchmarked algorithms as ``(name, in-place sorter)`` in run order."""
    return [
        ("Bubble Sort", bubble_sort),
        ("Merge Sort", _merge),
        ("Quick_Sort", _quick),
        ("Insertion Sort", insertion_sort),
        ("Selection Sort", selection_sort),
        ("Counting Sort", counting_sort),
        ("Radix Sort", radix_sort),
        ("Heap Sort", _heap),
    ]


def time_algorithms(original: list[int], repeats: int = DEFAULT_REPEATS) -> list[list[Timing]]:
    """Run every algorithm on a fresh copy of ``original`` ``repeats`` times.

    Returns one list of timings per repeat, in algorithm order.
    """
    runs: list[list[Timing]] = []
    for _ in range(repeats):
        run: list[Timing] = []
        for name, sorter in algorithms():
            values = list(original)
            start = time.process_time()
            sorter(values)
            run.append(Timing(name, time.process_time() - start))
        runs.append(run)
    return runs


def run_benchmark(
    sizes: Iterable[int] = DEFAULT_SIZES,
    kind: ArrayKind | str = ArrayKind.HALF_SORTED,
    value_range: int = DEFAULT_RANGE,
    repeats: int = DEFAULT_REPEATS,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> list[tuple[int, list[list[Timing]]]]:
    """Benchmark every algorithm for each size and write a report to ``out``.

    Raises ValueError when ``kind`` names no known input shape.
    """
    kind = ArrayKind(kind)
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()
    results: list[tuple[int, list[list[Timing]]]] = []
    for size in sizes:
        original = make_array(kind, size, value_range, rng)
        out.write(f"\nVector size: {size}\nsorted type: {kind.value}\n")
        if kind is ArrayKind.RANDOM:
            out.write(f"range: {value_range}\n")
        runs = time_algorithms(original, repeats)
        for number, run in enumerate(runs, start=1):
            out.write(f"\nTest # : {number}\n")
            for timing in run:
                out.write(f"\n{timing.name}: {timing.seconds:g}\n")
        out.write(_RULE + "\n")
        results.append((size, runs))
    return results


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Time sorting algorithms on generated data.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument(
        "--kind",
        choices=[k.value for k in ArrayKind],
        default=ArrayKind.HALF_SORTED.value,
    )
    parser.add_argument("--range", dest="value_range", type=int, default=DEFAULT_RANGE)
    parser.add_argument("--repeats", type=int, default=DEFAULT_REPEATS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    run_benchmark(
        args.sizes,
        args.kind,
        args.value_range,
        args.repeats,
        sys.stdout,
        random.Random(args.seed),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())