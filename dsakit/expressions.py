"""Conversion between infix, postfix and prefix notation, and postfix evaluation."""

from __future__ import annotations

import operator as _op
import string
from typing import Callable, Collection

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


class ExpressionError(ValueError):
    """Raised for a malformed or unevaluable expression."""


def precedence(operator: str) -> int:
    """Return the binding strength of an operator; -1 for anything else."""
    return _PRECEDENCE.get(operator, -1)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _to_postfix(expression: str, pop_on_equal: Collection[str]) -> str:
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        elif char in _PRECEDENCE:
            rank = precedence(char)
            while stack:
                top = precedence(stack[-1])
                if rank < top or (rank == top and char in pop_on_equal):
                    output.append(stack.pop())
                else:
                    break
            stack.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    All operators, ``^`` included, associate to the left.
    """
    return _to_postfix(expression, frozenset(_PRECEDENCE))


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression of single-character operands to prefix.

    ``^`` associates to the right, the other operators to the left.
    """
    mirrored = expression[::-1].translate(str.maketrans("()", ")("))
    return _to_postfix(mirrored, frozenset("^"))[::-1]


def _c_divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ExpressionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _c_remainder(dividend: int, divisor: int) -> int:
    return dividend - divisor * _c_divide(dividend, divisor)


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return int(base**exponent)


_EVALUATORS: dict[str, Callable[[int, int], int]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _c_divide,
    "%": _c_remainder,
    "^": _power,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Spaces and tabs are ignored. Division and remainder truncate toward zero.
    """
    stack: list[int] = []
    for char in expression:
        if char in " \t":
            continue
        if char in string.digits:
            stack.append(int(char))
            continue
        evaluator = _EVALUATORS.get(char)
        if evaluator is None:
            raise ExpressionError(f"invalid operator {char!r}")
        if len(stack) < 2:
            raise ExpressionError(f"operator {char!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(evaluator(left, right))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]