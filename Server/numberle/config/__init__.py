"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the equation corpus
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, EQUATION_LENGTH, FALLBACK_EQUATION, MAX_ATTEMPTS,
    load_equation_list, validate_equation_list_integrity, get_equation_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'EQUATION_LENGTH', 'FALLBACK_EQUATION', 'MAX_ATTEMPTS',
    'load_equation_list', 'validate_equation_list_integrity', 'get_equation_statistics'
]
