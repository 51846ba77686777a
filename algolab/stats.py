"""Descriptive statistics: mean, median, population variance and standard deviation."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Statistics:
    mean: float
    median: float
    variance: float
    std_dev: float


def calculate_statistics(data: Iterable[float]) -> Statistics:
    """Summarise the data; an empty input yields all zeros."""
    values = sorted(data)
    if not values:
        return Statistics(0.0, 0.0, 0.0, 0.0)

    size = len(values)
    mean = sum(values, 0.0) / size
    middle = size // 2
    if size % 2 == 0:
        median = (values[middle - 1] + values[middle]) / 2.0
    else:
        median = float(values[middle])
    variance = sum(((value - mean) ** 2 for value in values), 0.0) / size
    return Statistics(mean, median, variance, math.sqrt(variance))


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Print statistics for a sample data set.").parse_args(argv)

    data = [2, 4, 4, 4, 5, 5, 7, 9]
    print("Data set: {2, 4, 4, 4, 5, 5, 7, 9}")
    print("-" * 35)
    stats = calculate_statistics(data)
    print(f"Mean               : {stats.mean:.4f}")
    print(f"Median             : {stats.median:.4f}")
    print(f"Variance           : {stats.variance:.4f}")
    print(f"Standard Deviation : {stats.std_dev:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())