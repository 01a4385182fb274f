"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Classification(Enum):
    """Per-position evaluation of a guessed character."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class ResultCode(Enum):
    """Outcome of submitting one guess."""
    ACCEPTED = "ACCEPTED"
    INVALID_LENGTH = "INVALID_LENGTH"
    NO_EQUAL_SIGN = "NO_EQUAL_SIGN"
    MISSING_SYMBOLS = "MISSING_SYMBOLS"
    NOT_EQUAL = "NOT_EQUAL"


class GameStatus(Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass
class GameState:
    """Serializable snapshot of one game session."""
    game_id: str
    status: str
    remaining_attempts: int
    max_attempts: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # (character, classification) per position
    position_feedback: List[str]
    classification: Dict[str, List[str]]  # "Green" / "Orange" / "Gray" -> sorted characters
    unused_characters: List[str]
    answer: Optional[str] = None  # Only included when game is over
