"""
Game Configuration Constants Module

This module defines the Numberle game constants and the equation corpus
helpers. All game parameters are centralized here to enable easy modification.
"""

import logging
import os
import re
from typing import Dict, Final, List, Tuple

# Core Game Configuration Constants
EQUATION_LENGTH: Final[int] = 7
"""
Number of characters in every target and every guess, including the '='.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of accepted guesses allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

FALLBACK_EQUATION: Final[str] = "1+2+3=6"
"""
Target used when random selection is disabled or the corpus is empty.
"""

DIGITS: Final[str] = "0123456789"
OPERATORS: Final[str] = "+-*/"
EQUAL_SIGN: Final[str] = "="

ALPHABET: Final[Tuple[str, ...]] = tuple(DIGITS + OPERATORS)
"""
Characters tracked by the keyboard classification (the '=' is not tracked).
"""

EQUATION_PATTERN: Final["re.Pattern[str]"] = re.compile(
    r"^[+-]?[0-9]+([+\-*/][0-9]+)*=[+-]?[0-9]+([+\-*/][0-9]+)*$"
)

BALANCE_TOLERANCE: Final[float] = 1e-4
"""
Largest difference between both sides still considered equal (absorbs
floating point error from division).
"""

DEFAULT_EQUATIONS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'equations.txt'
)

logger = logging.getLogger('numberle_game')


def load_equation_list(file_path: str = DEFAULT_EQUATIONS_FILE) -> List[str]:
    """
    Load candidate target equations from a plain text file.

    Args:
        file_path: Path to a file holding one equation per line

    Returns:
        List[str]: Equations in file order, blank lines skipped. An unreadable
        file yields an empty list so the game falls back to FALLBACK_EQUATION.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            equations = [line.strip() for line in f if line.strip()]
    except OSError as e:
        logger.warning(f"Equation list unavailable ({file_path}): {e}")
        return []

    if not equations:
        logger.warning(f"Equation list is empty: {file_path}")
    return equations


def filter_valid_equations(equations: List[str]) -> List[str]:
    """
    Keeps the equations that can serve as a target.

    Entries of the wrong length or that fail validation are dropped with a
    warning, so a broken corpus line can never become an unwinnable target.
    """
    from ..services.equation_validator import EquationValidator, Verdict

    validator = EquationValidator()
    valid = []
    for equation in equations:
        if isinstance(equation, str) and len(equation) == EQUATION_LENGTH \
                and validator.classify(equation) is Verdict.VALID:
            valid.append(equation)
        else:
            logger.warning(f"Dropping invalid equation from corpus: {equation!r}")
    return valid


def validate_equation_list_integrity(equations: List[str]) -> bool:
    """
    Validates the integrity and consistency of an equation corpus.

    This function performs validation to ensure:
    1. Length validation: All equations must be exactly 7 characters
    2. Grammar validation: Signed integer chains on both sides of one '='
    3. Balance validation: Both sides evaluate to the same value
    4. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if the corpus passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    from ..services.equation_validator import EquationValidator, Verdict

    if not equations:
        raise ValueError("Equation list cannot be empty")

    validator = EquationValidator()
    for index, equation in enumerate(equations):
        if len(equation) != EQUATION_LENGTH:
            raise ValueError(
                f"Equation at index {index} '{equation}' is not {EQUATION_LENGTH} characters long"
            )

        verdict = validator.classify(equation)
        if verdict is not Verdict.VALID:
            raise ValueError(f"Equation at index {index} '{equation}' is invalid: {verdict.value}")

    if len(equations) != len(set(equations)):
        duplicates = sorted({eq for eq in equations if equations.count(eq) > 1})
        raise ValueError(f"Duplicate equations found in equation list: {duplicates}")

    return True


def get_equation_statistics(equations: List[str]) -> Dict:
    """
    Analyzes an equation corpus and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_equations: Number of equations in the corpus
            - avg_operator_count: Average arithmetic operators per equation
            - operator_usage: How often each operator appears
            - character_frequency: Distribution of characters across all equations
    """
    if not equations:
        return {"error": "Equation list is empty"}

    character_frequency: Dict[str, int] = {}
    for equation in equations:
        for char in equation:
            character_frequency[char] = character_frequency.get(char, 0) + 1

    operator_usage = {op: character_frequency.get(op, 0) for op in OPERATORS}
    total_operators = sum(operator_usage.values())

    return {
        "total_equations": len(equations),
        "avg_operator_count": round(total_operators / len(equations), 2),
        "operator_usage": operator_usage,
        "character_frequency": character_frequency,
        "most_common_characters": sorted(character_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        corpus = load_equation_list()
        validate_equation_list_integrity(corpus)
        print(" Equation list validation passed")

        stats = get_equation_statistics(corpus)
        print(f" Game statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
