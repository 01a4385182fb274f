"""
Feedback Engine

Compares a guess with the target position by position and keeps the
keyboard classification (Green / Orange / Gray) accumulated over a game.
"""

from typing import Dict, Iterable, List, Set

from ..config.game_settings import ALPHABET
from ..models.game import Classification

GREEN = "Green"
ORANGE = "Orange"
GRAY = "Gray"


def compute_feedback(guess: str, target: str) -> List[Classification]:
    """
    Classifies every position of an accepted guess.

    Presence is a plain containment test on the target, so a repeated
    character can be PRESENT at several positions even if the target holds
    it once.
    """
    if guess == target:
        return [Classification.CORRECT] * len(guess)

    feedback = []
    for i, char in enumerate(guess):
        if i < len(target) and char == target[i]:
            feedback.append(Classification.CORRECT)
        elif char in target:
            feedback.append(Classification.PRESENT)
        else:
            feedback.append(Classification.ABSENT)
    return feedback


class ClassificationSets:
    """
    Character classification accumulated across the guesses of one game.

    A Green character never returns to Orange or Gray. Orange only takes
    characters that are not Green, Gray only takes characters in neither.
    Only characters of the alphabet are tracked.
    """

    def __init__(self):
        self.green: Set[str] = set()
        self.orange: Set[str] = set()
        self.gray: Set[str] = set()
        self.seen: Set[str] = set()

    def update(self, guess: str, feedback: Iterable[Classification]) -> None:
        for char, classification in zip(guess, feedback):
            if char not in ALPHABET:
                continue
            self.seen.add(char)

            if classification is Classification.CORRECT:
                self.green.add(char)
                self.orange.discard(char)
                self.gray.discard(char)
            elif classification is Classification.PRESENT:
                if char not in self.green:
                    self.orange.add(char)
                    self.gray.discard(char)
            elif char not in self.green and char not in self.orange:
                self.gray.add(char)

    def as_dict(self) -> Dict[str, Set[str]]:
        return {GREEN: set(self.green), ORANGE: set(self.orange), GRAY: set(self.gray)}

    def unused(self) -> List[str]:
        """Alphabet characters that have not appeared in any accepted guess."""
        return [char for char in ALPHABET if char not in self.seen]
