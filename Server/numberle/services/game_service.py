"""
Game Service

Keeps the Numberle sessions played through the HTTP API.
"""

import uuid
from typing import Dict, List, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import filter_valid_equations, load_equation_list
from ..models.game import GameState, ResultCode
from .game_session import GameSession


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Loading the equation corpus once for all sessions
    - Routing guesses to the right session
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self,
                 equations: Optional[List[str]] = None,
                 max_attempts: int = Config.MAX_ATTEMPTS,
                 random_target: bool = Config.RANDOM_TARGET):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        if equations is None:
            equations = load_equation_list(Config.EQUATIONS_FILE)
        self.equations = filter_valid_equations(list(equations))
        self.max_attempts = max_attempts
        self.random_target = random_target

    def create_new_game(self, random_target: Optional[bool] = None) -> str:
        """
        Creates a new game session.

        Args:
            random_target: Draw the target from the corpus (defaults to the
                service setting); False plays the fixed fallback equation

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = GameSession(
            equations=self.equations,
            max_attempts=self.max_attempts,
            random_target=self.random_target if random_target is None else random_target
        )
        session.start_new_game()

        self.games[game_id] = session
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.to_state(game_id)

    def make_guess(self, game_id: str, guess: str) -> Optional[Tuple[ResultCode, GameState]]:
        """
        Submits a guess to a session.

        Returns:
            (ResultCode, GameState) or None if game not found

        Raises:
            GameStateError: If the game is already over
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        result = session.submit_guess(guess)
        return result, session.to_state(game_id)

    def reveal_answer(self, game_id: str) -> Optional[str]:
        """Returns the target of a session (the "show answer" feature)."""
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.get_target()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
