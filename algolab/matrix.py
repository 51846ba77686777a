"""Dense matrices of floats with element-wise and matrix arithmetic."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence


class DimensionError(ValueError):
    """Raised when two matrices have incompatible shapes for an operation."""


class Matrix:
    """A rows x cols matrix of floats, initialised to zero."""

    __hash__ = None  # mutable, compared by value

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self.data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        return cls._with_data(len(data), width, data)

    @classmethod
    def _with_data(cls, rows: int, cols: int, data: list[list[float]]) -> "Matrix":
        matrix = cls(rows, cols)
        matrix.data = data
        return matrix

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def format(self) -> str:
        """Render each value right-aligned in 8 columns, followed by a blank line."""
        lines = ["".join(f"{value:>8g} " for value in row) + "\n" for row in self.data]
        return "".join(lines) + "\n"

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return subtract(self, other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.data!r})"


def _require_same_shape(a: Matrix, b: Matrix, operation: str) -> None:
    if a.shape != b.shape:
        raise DimensionError(f"Matrices must have the same dimensions for {operation}.")


def add(a: Matrix, b: Matrix) -> Matrix:
    """Return the element-wise sum of two equally shaped matrices."""
    _require_same_shape(a, b, "addition")
    data = [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a.data, b.data)]
    return Matrix._with_data(a.rows, a.cols, data)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """Return the element-wise difference of two equally shaped matrices."""
    _require_same_shape(a, b, "subtraction")
    data = [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a.data, b.data)]
    return Matrix._with_data(a.rows, a.cols, data)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product a x b."""
    if a.cols != b.rows:
        raise DimensionError("Incompatible dimensions for multiplication.")
    columns = list(zip(*b.data)) if b.rows else [()] * b.cols
    data = [
        [sum((x * y for x, y in zip(row, column)), 0.0) for column in columns]
        for row in a.data
    ]
    return Matrix._with_data(a.rows, b.cols, data)


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Demonstrate matrix arithmetic.").parse_args(argv)

    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    b = Matrix.from_rows([[10, 11, 12], [1, 2, 3]])
    c = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])

    for title, matrix in (
        ("--- Matrix A (2x3) ---", a),
        ("--- Matrix B (2x3) ---", b),
        ("--- Matrix C (3x2) ---", c),
        ("--- Addition (A + B) ---", a + b),
        ("--- Subtraction (A - B) ---", a - b),
        ("--- Multiplication (A * C) ---", a @ c),
    ):
        print(title)
        print(matrix.format(), end="")

    print("--- Invalid Multiplication (A * B) ---")
    try:
        a @ b
    except DimensionError as error:
        print(f"Error: {error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())