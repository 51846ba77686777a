import random

import pytest

from algolab.merge_sort import (
    ADAPTIVE_THRESHOLD,
    benchmark_sort,
    concurrent_merge_sort,
    main,
    sequential_merge_sort,
)


def _random_data(size, seed):
    rng = random.Random(seed)
    return [rng.randint(0, 1000000) for _ in range(size)]


@pytest.mark.parametrize("size", [0, 1, 2, 7, 100, 2500])
def test_sequential_matches_sorted(size):
    data = _random_data(size, size)
    expected = sorted(data)
    sequential_merge_sort(data)
    assert data == expected


@pytest.mark.parametrize("sorter", [sequential_merge_sort, concurrent_merge_sort])
def test_key_sort_is_stable(sorter):
    rng = random.Random(7)
    pairs = [(rng.randint(0, 5), index) for index in range(300)]
    expected = sorted(pairs, key=lambda pair: pair[0])
    if sorter is concurrent_merge_sort:
        sorter(pairs, key=lambda pair: pair[0], threshold=4)
    else:
        sorter(pairs, key=lambda pair: pair[0])
    assert pairs == expected


def test_descending_key():
    data = _random_data(200, 3)
    concurrent_merge_sort(data, key=lambda value: -value, threshold=10)
    assert data == sorted(data, reverse=True)


def test_error_in_worker_thread_propagates():
    data = [1, "a"] * 20
    with pytest.raises(TypeError):
        concurrent_merge_sort(data, threshold=2)


def test_threshold_must_be_positive():
    with pytest.raises(ValueError):
        concurrent_merge_sort([3, 1, 2], threshold=0)


def test_benchmark_sort_sorts_and_reports(capsys):
    data = _random_data(500, 11)
    expected = sorted(data)
    elapsed = benchmark_sort("Sequential Merge Sort (Tiny)", sequential_merge_sort, data)
    out = capsys.readouterr().out
    assert data == expected
    assert elapsed >= 0.0
    assert out.startswith("Sequential Merge Sort (Tiny) sorted 500 elements in: ")
    assert out.rstrip().endswith(" seconds")


def test_main_with_small_sizes(capsys):
    assert main(["--sizes", "50", "60", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Benchmarking with 50 elements:" in out
    assert "Concurrent Merge Sort (Medium) sorted 60 elements" in out
    assert out.rstrip().endswith("--- Benchmarking Complete ---")