"""Recursive-descent evaluator for integer arithmetic expressions."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expression(self) -> int:
        result = self.term()
        while (op := self._peek()) in ("+", "-") and op:
            self.pos += 1
            operand = self.term()
            result = result + operand if op == "+" else result - operand
        return result

    def term(self) -> int:
        result = self.factor()
        while (op := self._peek()) in ("*", "/") and op:
            self.pos += 1
            operand = self.factor()
            if op == "*":
                result *= operand
            else:
                if operand == 0:
                    raise ExpressionError("Division by zero!")
                result = _truncating_div(result, operand)
        return result

    def factor(self) -> int:
        if self._peek() == "(":
            self.pos += 1
            result = self.expression()
            if self._peek() != ")":
                raise ExpressionError("Mismatched parentheses: Expected ')'")
            self.pos += 1
            return result
        return self.number()

    def number(self) -> int:
        start = self.pos
        while self._peek() in _DIGITS:
            self.pos += 1
        if self.pos == start:
            raise ExpressionError("Expected a number.")
        digits = self.text[start:self.pos]
        value = int(digits)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ExpressionError(f"Number out of range: '{digits}'")
        return value


def evaluate_expression(expr: str) -> int:
    """Evaluate +, -, *, / and parentheses over non-negative integer literals.

    Division truncates toward zero. Whitespace is not accepted.
    """
    parser = _Parser(expr)
    result = parser.expression()
    if parser.pos < len(expr):
        raise ExpressionError(
            f"Unexpected characters at end of expression: '{expr[parser.pos:]}'"
        )
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions.")
    parser.add_argument("expressions", nargs="*", help="expressions to evaluate")
    args = parser.parse_args(argv)

    expressions = args.expressions or ["1+2*3", "(1+2)*3", "10-4/2", "10/0"]
    print("--- Expression Evaluator Basic Tests ---\n")
    for expr in expressions:
        print(f'Expression: "{expr}"')
        try:
            result = evaluate_expression(expr)
        except ExpressionError as error:
            print(f"Error: {error}", file=sys.stderr)
            result = 0
        print(f"Result: {result}\n")
    print("--- Tests Completed ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())