"""
Utilities Package

Contains utility functions and the game logger.
"""

from .helpers import get_user_identity, normalize_word
from .game_logger import game_logger

__all__ = ['get_user_identity', 'normalize_word', 'game_logger']
