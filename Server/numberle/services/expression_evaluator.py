"""
Expression Evaluator

Evaluates one side of a Numberle equation: optionally signed integers joined
by + - * / with the usual precedence and no parentheses.
"""

import re
from typing import List, Tuple

from ..config.game_settings import OPERATORS

_SIDE_PATTERN = re.compile(r"[+-]?[0-9]+(?:[+\-*/][0-9]+)*")
_OPERATOR_SPLIT = re.compile(r"([+\-*/])")


class ParseError(ValueError):
    """Raised when a side is not a chain of signed integers and operators."""


def _tokenize(side: str) -> Tuple[List[float], List[str]]:
    """Split a side into its numbers and the operators between them."""
    if not isinstance(side, str) or not _SIDE_PATTERN.fullmatch(side):
        raise ParseError(f"Malformed expression: {side!r}")

    # A leading sign belongs to the first number, not to an operator
    sign = side[0] if side[0] in "+-" else ""
    parts = _OPERATOR_SPLIT.split(side[len(sign):])

    numbers = [float(sign + parts[0])]
    operators: List[str] = []
    for i in range(1, len(parts), 2):
        operators.append(parts[i])
        numbers.append(float(parts[i + 1]))
    return numbers, operators


def evaluate_side(side: str) -> float:
    """
    Evaluates one side of an equation.

    Multiplication and division are collapsed left to right first, then
    addition and subtraction are applied left to right over what remains.

    Args:
        side: Expression such as "-12+3*4"

    Returns:
        float: Value of the expression

    Raises:
        ParseError: If the expression is malformed
        ZeroDivisionError: If the expression divides by zero
    """
    numbers, operators = _tokenize(side)

    # First pass: * and /
    i = 0
    while i < len(operators):
        operator = operators[i]
        if operator in "*/":
            if operator == "*":
                numbers[i] = numbers[i] * numbers[i + 1]
            else:
                numbers[i] = numbers[i] / numbers[i + 1]
            del numbers[i + 1]
            del operators[i]
        else:
            i += 1

    # Second pass: + and -
    result = numbers[0]
    for operator, number in zip(operators, numbers[1:]):
        if operator == "+":
            result += number
        elif operator == "-":
            result -= number
        else:
            raise ParseError(f"Unexpected operator: {operator!r} (expected one of {OPERATORS})")
    return result
