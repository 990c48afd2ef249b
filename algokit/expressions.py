"""Bracket matching and postfix evaluation."""

from __future__ import annotations

_OPENERS = "([{"
_CLOSER_TO_OPENER = {")": "(", "}": "{", "]": "["}


def is_balanced(expr: str) -> bool:
    """Tell whether the brackets ()[]{} in ``expr`` are balanced.

    Any character other than an opening bracket met while nothing is open
    makes the expression unbalanced.
    """
    stack: list[str] = []
    for ch in expr:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        opener = _CLOSER_TO_OPENER.get(ch)
        if opener is not None and stack.pop() != opener:
            return False
    return not stack


def _divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def evaluate_postfix(expr: str) -> int:
    """Evaluate a postfix expression of single digits and + - * /.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for ch in expr:
        if "0" <= ch <= "9":
            stack.append(int(ch))
            continue
        operation = _OPERATIONS.get(ch)
        if operation is None:
            raise ValueError(f"unknown operator {ch!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]