"""
Services Package

Contains the game service and the word provider clients.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .word_provider import RandomWordApiProvider, WordProvider

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'RandomWordApiProvider', 'WordProvider'
]
