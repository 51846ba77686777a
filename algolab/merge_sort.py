"""Sequential and thread-parallel merge sort with a benchmark helper."""

from __future__ import annotations

import argparse
import heapq
import random
import sys
import threading
import time
from typing import Any, Callable, MutableSequence, Sequence

ADAPTIVE_THRESHOLD = 2000
DEFAULT_SIZES = (100000, 1000000, 10000000)

KeyFunc = Callable[[Any], Any] | None


def _merge(items: MutableSequence, lo: int, mid: int, hi: int, key: KeyFunc) -> None:
    items[lo:hi] = list(heapq.merge(items[lo:mid], items[mid:hi], key=key))


def _sequential(items: MutableSequence, lo: int, hi: int, key: KeyFunc) -> None:
    if hi - lo <= 1:
        return
    mid = lo + (hi - lo) // 2
    _sequential(items, lo, mid, key)
    _sequential(items, mid, hi, key)
    _merge(items, lo, mid, hi, key)


def sequential_merge_sort(items: MutableSequence, key: KeyFunc = None) -> None:
    """Sort items in place with a stable top-down merge sort."""
    _sequential(items, 0, len(items), key)


def _concurrent(items: MutableSequence, lo: int, hi: int, key: KeyFunc, threshold: int) -> None:
    if hi - lo <= threshold:
        items[lo:hi] = sorted(items[lo:hi], key=key)
        return
    mid = lo + (hi - lo) // 2
    errors: list[BaseException] = []

    def sort_left() -> None:
        try:
            _concurrent(items, lo, mid, key, threshold)
        except BaseException as error:
            errors.append(error)

    worker = threading.Thread(target=sort_left)
    worker.start()
    try:
        _concurrent(items, mid, hi, key, threshold)
    finally:
        worker.join()
    if errors:
        raise errors[0]
    _merge(items, lo, mid, hi, key)


def concurrent_merge_sort(
    items: MutableSequence, key: KeyFunc = None, threshold: int = ADAPTIVE_THRESHOLD
) -> None:
    """Sort items in place, splitting ranges larger than threshold across threads."""
    if threshold < 1:
        raise ValueError("threshold must be at least 1")
    _concurrent(items, 0, len(items), key, threshold)


def benchmark_sort(
    name: str, sort_func: Callable[[MutableSequence], None], data: MutableSequence
) -> float:
    """Sort data in place with sort_func, report the time taken and return it in seconds."""
    start = time.perf_counter()
    sort_func(data)
    elapsed = time.perf_counter() - start
    print(f"{name} sorted {len(data)} elements in: {elapsed:.6f} seconds")
    return elapsed


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark sequential and concurrent merge sort.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    print("--- Concurrent Merge Sort Benchmarking ---\n")
    labels = ("Small", "Medium", "Large")
    for index, size in enumerate(args.sizes):
        label = labels[index] if index < len(labels) else f"Run {index + 1}"
        print(f"Benchmarking with {size} elements:")
        data = [rng.randint(0, 1000000) for _ in range(size)]
        benchmark_sort(f"Sequential Merge Sort ({label})", sequential_merge_sort, list(data))
        benchmark_sort(f"Concurrent Merge Sort ({label})", concurrent_merge_sort, list(data))
        print()
    print("--- Benchmarking Complete ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())