"""Monte Carlo estimation of pi."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Sequence

SAMPLE_SIZES = (100, 1000, 10000, 100000, 1000000, 10000000)


def estimate_pi(num_points: int, rng: random.Random | None = None) -> float:
    """Estimate pi from the share of random unit-square points inside the quarter circle."""
    if num_points <= 0:
        return 0.0
    rng = rng if rng is not None else random.Random()
    inside = sum(
        1 for _ in range(num_points) if rng.random() ** 2 + rng.random() ** 2 <= 1.0
    )
    return 4.0 * inside / num_points


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Estimate pi by random sampling.").parse_args(argv)

    rule = "-" * 60
    print("Estimating Pi using the Monte Carlo Method")
    print(rule)
    print(f"{'Sample Size':<15}{'Estimated Pi':<20}Error")
    print(rule)
    rng = random.Random()
    for n in SAMPLE_SIZES:
        estimate = estimate_pi(n, rng)
        error = abs(estimate - math.pi)
        print(f"{n:<15}{estimate:<20.8f}{error:.8f}")
    print(rule)
    print(f"True value of Pi: {math.pi:.8f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())