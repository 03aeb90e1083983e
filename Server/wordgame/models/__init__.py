"""
Data Models Package

Contains all data models and enums used throughout the application.
"""

from .game import EvaluatedGuess, GameState, LetterStatus, SessionStatus

__all__ = ['EvaluatedGuess', 'GameState', 'LetterStatus', 'SessionStatus']
