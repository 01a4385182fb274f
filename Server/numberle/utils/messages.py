"""
Player-facing texts for guess results.
"""

from typing import Dict, Iterable, Optional, Set

from ..models.game import Classification, ResultCode
from ..services.equation_validator import lacks_operator

RESULT_MESSAGES: Dict[ResultCode, str] = {
    ResultCode.ACCEPTED: "Try again.",
    ResultCode.INVALID_LENGTH: "Invalid Input. The equation must have exactly 7 characters.",
    ResultCode.NO_EQUAL_SIGN: "No equal '=' sign.",
    ResultCode.MISSING_SYMBOLS: "The equation is not well formed.",
    ResultCode.NOT_EQUAL: "The left side is not equal to the right.",
}

MISSING_OPERATOR_MESSAGE = "There must be at least one '+-*/'."

FEEDBACK_MARKS: Dict[Classification, str] = {
    Classification.CORRECT: "G",
    Classification.PRESENT: "O",
    Classification.ABSENT: "-",
}


def result_message(result: ResultCode, guess: Optional[str] = None) -> str:
    """Message for a result code; a guess without operators gets its own text."""
    if result is ResultCode.MISSING_SYMBOLS and guess is not None and lacks_operator(guess):
        return MISSING_OPERATOR_MESSAGE
    return RESULT_MESSAGES[result]


def format_feedback(feedback: Iterable[Classification]) -> str:
    return "".join(FEEDBACK_MARKS[classification] for classification in feedback)


def format_classification(sets: Dict[str, Set[str]]) -> str:
    return "\n".join(f"{color}: {sorted(chars)}" for color, chars in sets.items())
