"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Classification, GameState, GameStatus, ResultCode

__all__ = ['Classification', 'GameState', 'GameStatus', 'ResultCode']
