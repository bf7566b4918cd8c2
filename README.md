# sortbench

Textbook sorting algorithms for lists of integers, and a command that
times them against each other on generated input.

## Algorithms

Every sort changes the list you pass in place.

`sortbench.simple`

- `insertion_sort`: sorts by swapping each element to the left until it is
  in place.
- `selection_sort`: sorts by moving the smallest remaining element forward.
  It raises `ValueError` on an empty list.
- `bubble_sort`: makes `len(values) - 2` passes. That fixes the largest
  `len(values) - 2` elements in their final places. The first two positions
  stay as the last pass left them, so short or unlucky inputs can end up
  not fully sorted. For example, `[3, 2, 1]` becomes `[2, 1, 3]`.
- `counting_sort`: a stable counting sort.
- `radix_sort`: a least-significant-digit radix sort in base ten.

`counting_sort` and `radix_sort` accept only non-negative integers. They
raise `ValueError` if the list is empty or holds a negative value.

`sortbench.divide`

- `merge_sort(values, start=0, end=None)` sorts the inclusive range
  `values[start..end]` and returns `values`. `merge` joins two adjacent
  sorted runs.
- `quick_sort(values, low=0, high=None, pivot=PivotStrategy.RANDOM, rng=None)`
  uses Hoare partitioning through `partition`. `PivotStrategy` is one of
  `LOW`, `MEDIAN` (median of first, middle and last) or `RANDOM`. A strategy
  name that is not recognised picks a random pivot. Pass a `random.Random`
  as `rng` to make the choices reproducible.

`sortbench.heap`

Binary max-heaps and min-heaps kept in plain lists:

- `build_max_heap`, `build_min_heap`
- `max_heapify`, `min_heapify`
- `insert_max`, `insert_min`
- `modify_max`, `modify_min`: take a 1-based position and raise `IndexError`
  when it is out of range.
- `extract_maximum`, `extract_minimum`: raise `IndexError` on an empty list.
- `ascending_heap_sort`, `descending_heap_sort`
- `format_values`: joins the values with single spaces.

```python
from sortbench.simple import counting_sort
from sortbench.divide import quick_sort, PivotStrategy

data = [5, 3, 9, 1, 3]
counting_sort(data)
print(data)  # [1, 3, 3, 5, 9]

other = [4, 8, 2, 6]
quick_sort(other, pivot=PivotStrategy.MEDIAN)
print(other)  # [2, 4, 6, 8]
```

## Test inputs

`sortbench.arrays` builds inputs of the kinds listed in `ArrayKind`:

- `random_array(size, value_range)`: values in `0..value_range`.
- `sorted_array(size)`: `0..size-1`.
- `reverse_array(size)`: `size-1` down to `0`.
- `half_sorted_array(size)`: the first half is `0, 1, ...` and the second
  half holds random values in `size..2*size`.

`make_array(kind, size, value_range=1000, rng=None)` builds any of them. It
raises `ValueError` for an unknown kind.

## Benchmark

```
sortbench
```

For each size, the command builds one input. It then runs every algorithm
on its own copy of that input, repeats this several times, and prints the
CPU seconds each run took (`time.process_time`). The algorithms run in this
order: bubble, merge, quick (median pivot), insertion, selection, counting,
radix and heap sort.

Options:

- `--sizes N [N ...]`: input sizes. The default is 100, 1000, 10000,
  100000, 250000 and 1000000.
- `--kind {random,reverse,sorted,half sorted}`: the input shape. The default
  is `half sorted`.
- `--range N`: the upper bound of the values for `random` input. The default
  is 1000.
- `--repeats N`: the number of timed runs per size. The default is 3.
- `--seed N`: seeds the input generator and the random pivots.

Every size must be at least 1, because some of the sorts reject empty lists.
The quadratic sorts get very slow on large inputs, so choose small sizes
when you want results quickly:

```
sortbench --sizes 100 1000 --kind random --seed 1
```

From Python, `sortbench.bench.run_benchmark` writes the same report to any
text stream and returns the `Timing` records. `time_algorithms` times a
single input.

## Tests

```
pip install .[test]
pytest
```