"""
Game Errors

Exception hierarchy shared by the game core, the word provider and the
HTTP/WebSocket layers. Every error is recoverable at the caller's discretion.
"""

from typing import Optional


class WordgameError(Exception):
    """Base class for all game errors."""


class WordFetchFailed(WordgameError):
    """The word provider could not deliver a word of the requested length."""

    def __init__(self, message: str, language: Optional[str] = None, length: Optional[int] = None):
        super().__init__(message)
        self.language = language
        self.length = length


class InvalidGuessLength(WordgameError):
    """A guess does not have the length of the target word."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Guess must be exactly {expected} letters (got {actual})")
        self.expected = expected
        self.actual = actual


class SessionNotActive(WordgameError):
    """The session is not accepting guesses in its current status."""

    def __init__(self, status):
        super().__init__(f"Game is not in progress (status: {status.value})")
        self.status = status


class InvalidGameSettings(WordgameError, ValueError):
    """Unknown language/difficulty, or an invalid round configuration."""


class GameNotFound(WordgameError):
    """No game is registered under the given id."""

    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id
