"""Conversions between infix, prefix and postfix arithmetic notation.

Operands are single ASCII letters or digits, operators are ``+ - * /`` and
parentheses group infix sub-expressions. Any other character is ignored.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, List, Optional, Sequence

OPERATORS = frozenset("+-*/")


def is_operator(ch: str) -> bool:
    """Whether ``ch`` is one of the four arithmetic operators."""
    return ch in OPERATORS


def precedence(ch: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    if ch in ("+", "-"):
        return 1
    if ch in ("*", "/"):
        return 2
    return 0


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _shunt(chars: Iterable[str], opening: str, closing: str) -> str:
    output: List[str] = []
    stack: List[str] = []
    for ch in chars:
        if _is_operand(ch):
            output.append(ch)
        elif ch == opening:
            stack.append(ch)
        elif ch == closing:
            while stack and stack[-1] != opening:
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        elif is_operator(ch):
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    if opening in stack:
        raise ValueError("unbalanced parentheses")
    output.extend(reversed(stack))
    return "".join(output)


def _fold(chars: Iterable[str], build: Callable[[str, str, str], str]) -> str:
    """Reduce operands and operators with a stack.

    ``build`` receives the most recently pushed operand, the one beneath it
    and the operator.
    """
    stack: List[str] = []
    for ch in chars:
        if _is_operand(ch):
            stack.append(ch)
        elif is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"missing operand for {ch!r}")
            top = stack.pop()
            below = stack.pop()
            stack.append(build(top, below, ch))
    if len(stack) != 1:
        raise ValueError("malformed expression")
    return stack[0]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix."""
    return _shunt(expression, "(", ")")


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix."""
    return _shunt(reversed(expression), ")", "(")[::-1]


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression to fully parenthesised infix."""
    return _fold(expression, lambda top, below, op: f"({below}{op}{top})")


def prefix_to_infix(expression: str) -> str:
    """Convert a prefix expression to fully parenthesised infix."""
    return _fold(reversed(expression), lambda top, below, op: f"({top}{op}{below})")


def prefix_to_postfix(expression: str) -> str:
    """Convert a prefix expression to postfix."""
    return _fold(reversed(expression), lambda top, below, op: f"{top}{below}{op}")


def postfix_to_prefix(expression: str) -> str:
    """Convert a postfix expression to prefix."""
    return _fold(expression, lambda top, below, op: f"{op}{below}{top}")


_CONVERSIONS = {
    "infix-to-postfix": (infix_to_postfix, "Postfix"),
    "postfix-to-infix": (postfix_to_infix, "Infix"),
    "infix-to-prefix": (infix_to_prefix, "Prefix"),
    "prefix-to-infix": (prefix_to_infix, "Infix"),
    "prefix-to-postfix": (prefix_to_postfix, "Postfix"),
    "postfix-to-prefix": (postfix_to_prefix, "Prefix"),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert one expression given on the command line and print it."""
    parser = argparse.ArgumentParser(
        prog="labstructs-notation",
        description="Convert between infix, prefix and postfix notation.",
    )
    parser.add_argument("conversion", choices=sorted(_CONVERSIONS))
    parser.add_argument("expression")
    args = parser.parse_args(argv)
    convert, label = _CONVERSIONS[args.conversion]
    try:
        result = convert(args.expression)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"{label} expression: {result}")
    return 0