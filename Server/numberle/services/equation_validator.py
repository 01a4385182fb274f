"""
Equation Validator

Classifies a candidate equation as valid or names the first check it fails.
The checks run in a fixed order: '=' count, grammar, then arithmetic balance.
"""

from enum import Enum

from ..config.game_settings import (
    BALANCE_TOLERANCE, EQUAL_SIGN, EQUATION_PATTERN, OPERATORS
)
from ..models.game import ResultCode
from .expression_evaluator import evaluate_side


class Verdict(Enum):
    VALID = "VALID"
    NO_EQUAL_SIGN = "NO_EQUAL_SIGN"
    MISSING_SYMBOLS = "MISSING_SYMBOLS"
    MISSING_OPERATOR = "MISSING_OPERATOR"  # MISSING_SYMBOLS with no + - * / at all
    NOT_EQUAL = "NOT_EQUAL"

    @property
    def result_code(self) -> ResultCode:
        """Result code reported to the caller of a guess."""
        return _RESULT_CODES[self]


_RESULT_CODES = {
    Verdict.VALID: ResultCode.ACCEPTED,
    Verdict.NO_EQUAL_SIGN: ResultCode.NO_EQUAL_SIGN,
    Verdict.MISSING_SYMBOLS: ResultCode.MISSING_SYMBOLS,
    Verdict.MISSING_OPERATOR: ResultCode.MISSING_SYMBOLS,
    Verdict.NOT_EQUAL: ResultCode.NOT_EQUAL,
}


def lacks_operator(candidate: str) -> bool:
    """True when the candidate holds none of the arithmetic operators."""
    return not any(char in OPERATORS for char in candidate)


class EquationValidator:
    """
    Pure classifier for candidate equations.

    The tolerance absorbs floating point error introduced by division.
    """

    def __init__(self, tolerance: float = BALANCE_TOLERANCE):
        self.tolerance = tolerance

    def classify(self, candidate: str) -> Verdict:
        if candidate.count(EQUAL_SIGN) != 1:
            return Verdict.NO_EQUAL_SIGN

        if not EQUATION_PATTERN.fullmatch(candidate):
            if lacks_operator(candidate):
                return Verdict.MISSING_OPERATOR
            return Verdict.MISSING_SYMBOLS

        left, right = candidate.split(EQUAL_SIGN)
        if not self.is_balanced(left, right):
            return Verdict.NOT_EQUAL

        return Verdict.VALID

    def is_balanced(self, left: str, right: str) -> bool:
        """Compares the values of both sides; dividing by zero never balances."""
        try:
            difference = abs(evaluate_side(left) - evaluate_side(right))
        except ZeroDivisionError:
            return False
        return difference < self.tolerance
