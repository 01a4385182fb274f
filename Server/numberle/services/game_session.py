"""
Game Session

The Numberle state machine for one single-player game:
NOT_STARTED -> IN_PROGRESS -> WON / LOST.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..config.game_settings import (
    EQUATION_LENGTH, FALLBACK_EQUATION, MAX_ATTEMPTS, filter_valid_equations
)
from ..models.game import Classification, GameState, GameStatus, ResultCode
from .equation_validator import EquationValidator, Verdict
from .feedback import ClassificationSets, compute_feedback

logger = logging.getLogger('numberle_game')


class GameStateError(RuntimeError):
    """Raised when a guess is submitted to a game that is not in progress."""


class GameSession:
    """
    One Numberle game.

    This class handles:
    - Target selection from an equation corpus or the fixed fallback
    - Guess validation (length, '=' count, grammar, balance)
    - Attempt accounting and win/loss detection
    - Position feedback and the accumulated character classification

    Rejected guesses never change the session.
    """

    def __init__(self,
                 equations: Optional[Sequence[str]] = None,
                 max_attempts: int = MAX_ATTEMPTS,
                 random_target: bool = True,
                 rng: Optional[random.Random] = None):
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")

        self.equations: List[str] = filter_valid_equations(list(equations or []))
        self.max_attempts = max_attempts
        self.random_target = random_target
        self.rng = rng or random.Random()
        self.validator = EquationValidator()

        self.status = GameStatus.NOT_STARTED
        self._target: Optional[str] = None
        self._remaining_attempts = max_attempts
        self._position_feedback: List[Classification] = []
        self._classification = ClassificationSets()
        self._history: List[Tuple[str, List[Classification]]] = []

    def _select_target(self) -> str:
        if self.random_target and self.equations:
            return self.rng.choice(self.equations)
        return FALLBACK_EQUATION

    def start_new_game(self) -> None:
        """Starts a fresh game, discarding everything from the previous one."""
        self._target = self._select_target()
        self._remaining_attempts = self.max_attempts
        self._position_feedback = []
        self._classification = ClassificationSets()
        self._history = []
        self.status = GameStatus.IN_PROGRESS
        logger.debug(f"New Numberle game started, target: {self._target}")

    def submit_guess(self, guess: Optional[str]) -> ResultCode:
        """
        Processes a guess and updates game state.

        Args:
            guess: The 7-character equation guess

        Returns:
            ResultCode: ACCEPTED when an attempt was consumed, otherwise the
            reason the guess was rejected

        Raises:
            GameStateError: If the game is not in progress
        """
        if self.status is not GameStatus.IN_PROGRESS:
            raise GameStateError(f"Cannot guess while game is {self.status.value}")

        if not isinstance(guess, str) or len(guess) != EQUATION_LENGTH:
            return ResultCode.INVALID_LENGTH

        verdict = self.validator.classify(guess)
        if verdict is not Verdict.VALID:
            return verdict.result_code

        self._remaining_attempts -= 1
        self._position_feedback = compute_feedback(guess, self._target)
        self._classification.update(guess, self._position_feedback)
        self._history.append((guess, list(self._position_feedback)))

        if guess == self._target:
            self.status = GameStatus.WON
        elif self._remaining_attempts == 0:
            self.status = GameStatus.LOST

        return ResultCode.ACCEPTED

    def set_random_target_selection(self, random_target: bool) -> None:
        """Chooses between corpus and fallback target for the next game."""
        self.random_target = random_target

    def is_game_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.LOST)

    def is_game_won(self) -> bool:
        return self.status is GameStatus.WON

    def get_target(self) -> Optional[str]:
        return self._target

    def get_remaining_attempts(self) -> int:
        return self._remaining_attempts

    def get_position_feedback(self) -> List[Classification]:
        return list(self._position_feedback)

    def get_classification_sets(self) -> Dict[str, Set[str]]:
        return self._classification.as_dict()

    def get_unused_characters(self) -> List[str]:
        return self._classification.unused()

    @property
    def guesses(self) -> List[str]:
        return [guess for guess, _ in self._history]

    def to_state(self, game_id: str) -> GameState:
        """
        Returns a snapshot of the session (without revealing the answer).

        The answer is only included once the game is over.
        """
        return GameState(
            game_id=game_id,
            status=self.status.value,
            remaining_attempts=self._remaining_attempts,
            max_attempts=self.max_attempts,
            game_over=self.is_game_over(),
            won=self.is_game_won(),
            guesses=self.guesses,
            guess_results=[
                [(char, classification.value) for char, classification in zip(guess, feedback)]
                for guess, feedback in self._history
            ],
            position_feedback=[classification.value for classification in self._position_feedback],
            classification={
                color: sorted(chars) for color, chars in self.get_classification_sets().items()
            },
            unused_characters=self.get_unused_characters(),
            answer=self._target if self.is_game_over() else None
        )
