"""Polynomials and Newton-Raphson root finding."""

from __future__ import annotations

import argparse
import sys
from functools import reduce
from typing import Callable, Iterable, Sequence

_ZERO_SLOPE = 1e-12


class ConvergenceError(ArithmeticError):
    """Raised when Newton-Raphson cannot find a root."""


class Polynomial:
    """A polynomial given by coefficients from the highest power down."""

    def __init__(self, coeffs: Iterable[float]) -> None:
        self.coeffs = tuple(float(c) for c in coeffs)

    def evaluate(self, x: float) -> float:
        """Evaluate at x using Horner's scheme."""
        return reduce(lambda acc, coeff: acc * x + coeff, self.coeffs, 0.0)

    def derivative(self) -> "Polynomial":
        """Return the derivative; a constant's derivative is the zero polynomial."""
        if len(self.coeffs) <= 1:
            return Polynomial([0])
        degree = len(self.coeffs) - 1
        return Polynomial(
            coeff * (degree - power) for power, coeff in enumerate(self.coeffs[:-1])
        )

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coeffs)!r})"


def _solve(
    p: Polynomial,
    initial_guess: float,
    tolerance: float,
    max_iterations: int,
    on_step: Callable[[int, float], None] | None = None,
) -> float:
    slope = p.derivative()
    x_current = initial_guess
    for iteration in range(1, max_iterations + 1):
        y = p.evaluate(x_current)
        dy = slope.evaluate(x_current)
        if abs(dy) < _ZERO_SLOPE:
            raise ConvergenceError("Derivative is zero. Newton's method cannot continue.")
        x_next = x_current - y / dy
        if on_step is not None:
            on_step(iteration, x_next)
        if abs(x_next - x_current) < tolerance:
            return x_next
        x_current = x_next
    raise ConvergenceError(f"Failed to converge after {max_iterations} iterations.")


def newton_raphson_find_root(
    p: Polynomial,
    initial_guess: float,
    tolerance: float = 1e-7,
    max_iterations: int = 100,
) -> float:
    """Find a root of p starting from initial_guess.

    Stops when successive estimates differ by less than tolerance.
    """
    return _solve(p, initial_guess, tolerance, max_iterations)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find a root of x^2 - 9.")
    parser.add_argument("--guess", type=float, default=5.0, help="initial guess")
    args = parser.parse_args(argv)

    poly = Polynomial([1, 0, -9])
    print("Finding root for P(x) = x^2 - 9")
    print(f"Starting Newton-Raphson with guess x0 = {args.guess:g}")
    try:
        root = _solve(
            poly,
            args.guess,
            1e-7,
            100,
            on_step=lambda i, x: print(f"Iteration {i}: x = {x:.7f}"),
        )
    except ConvergenceError as error:
        label = "Warning" if str(error).startswith("Failed") else "Error"
        print(f"{label}: {error}", file=sys.stderr)
        root = None
    else:
        print("Success: Converged to a root.")

    print("\n" + "-" * 40)
    if root is None:
        print("Could not find a root.")
    else:
        print(f"Final root found: {root:.7f}")
        print(f"P({root:.7f}) = {poly.evaluate(root):.7f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())