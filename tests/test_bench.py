import io
import random

import pytest

from sortbench.bench import algorithms, main, run_benchmark, time_algorithms

NAMES = [
    "Bubble Sort",
    "Merge Sort",
    "Quick_Sort",
    "Insertion Sort",
    "Selection Sort",
    "Counting Sort",
    "Radix Sort",
    "Heap Sort",
]


def test_algorithm_names_in_order():
    assert [name for name, _ in algorithms()] == NAMES


@pytest.mark.parametrize("name", NAMES[1:])
def test_algorithms_sort(name):
    sorter = dict(algorithms())[name]
    rng = random.Random(7)
    values = [rng.randint(0, 500) for _ in range(200)]
    expected = sorted(values)
    sorter(values)
    assert values == expected


def test_bubble_sort_places_tail():
    sorter = dict(algorithms())["Bubble Sort"]
    values = list(range(30, 0, -1))
    expected = sorted(values)
    sorter(values)
    assert values[2:] == expected[2:]
    assert sorted(values) == expected


def test_time_algorithms_shape():
    runs = time_algorithms([5, 3, 9, 1, 0, 7], 2)
    assert len(runs) == 2
    for run in runs:
        assert [t.name for t in run] == NAMES
        assert all(t.seconds >= 0 for t in run)


def test_time_algorithms_leaves_original_untouched():
    original = [4, 2, 8, 6]
    time_algorithms(original, 1)
    assert original == [4, 2, 8, 6]


def test_run_benchmark_report():
    out = io.StringIO()
    results = run_benchmark([10, 20], "sorted", 1000, 2, out, random.Random(1))
    text = out.getvalue()
    assert [size for size, _ in results] == [10, 20]
    assert all(len(runs) == 2 for _, runs in results)
    assert "Vector size: 10" in text
    assert "Vector size: 20" in text
    assert text.count("sorted type: sorted") == 2
    assert text.count("Test # : 2") == 2
    assert text.count("Heap Sort: ") == 4
    assert text.count("=" * 43) == 2
    assert "range:" not in text


def test_run_benchmark_random_reports_range():
    out = io.StringIO()
    run_benchmark([12], "random", 50, 1, out, random.Random(3))
    text = out.getvalue()
    assert "sorted type: random" in text
    assert "range: 50" in text


def test_run_benchmark_invalid_kind():
    with pytest.raises(ValueError):
        run_benchmark([10], "shuffled", 1000, 1, io.StringIO(), random.Random(0))


def test_main_prints_report(capsys):
    code = main(["--sizes", "16", "--kind", "half sorted", "--repeats", "1", "--seed", "4"])
    captured = capsys.readouterr().out
    assert code == 0
    assert "Vector size: 16" in captured
    assert "sorted type: half sorted" in captured
    for name in NAMES:
        assert f"{name}: " in captured


def test_main_rejects_unknown_kind():
    with pytest.raises(SystemExit):
        main(["--sizes", "10", "--kind", "shuffled"])