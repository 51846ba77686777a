"""Matrices, statistics, expression parsing, root finding, sorting and thread pools, each with a demonstration."""

__version__ = "0.1.0"

__all__ = [
    "expression",
    "matrix",
    "merge_sort",
    "montecarlo",
    "newton",
    "priority_pool",
    "shared_ref",
    "stats",
    "work_stealing",
]