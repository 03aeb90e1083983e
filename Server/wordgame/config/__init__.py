"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DIFFICULTY_WORD_LENGTHS, SUPPORTED_LANGUAGES, get_max_attempts, get_settings_catalog,
    get_word_length, validate_language
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DIFFICULTY_WORD_LENGTHS', 'SUPPORTED_LANGUAGES', 'get_max_attempts',
    'get_settings_catalog', 'get_word_length', 'validate_language'
]
