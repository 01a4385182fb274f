"""
Services Package

Contains the game engine and the session registry.
"""

from .expression_evaluator import ParseError, evaluate_side
from .equation_validator import EquationValidator, Verdict
from .feedback import ClassificationSets, compute_feedback
from .game_session import GameSession, GameStateError
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'ParseError', 'evaluate_side',
    'EquationValidator', 'Verdict',
    'ClassificationSets', 'compute_feedback',
    'GameSession', 'GameStateError',
    'GameService', 'get_game_service', 'initialize_game_service'
]
