"""
Game Configuration Constants Module

This module defines the game rules: supported languages, difficulty levels
and the word length / attempt budget each difficulty implies.
All game parameters are centralized here to enable easy modification.
"""

from typing import Dict, Final, List

from ..errors import InvalidGameSettings

SUPPORTED_LANGUAGES: Final[Dict[str, str]] = {
    'en': 'English',
    'es': 'Español',
}
"""
Language tags accepted by the word provider, mapped to display names.
"""

DIFFICULTY_WORD_LENGTHS: Final[Dict[str, int]] = {
    'easy': 4,
    'medium': 5,
    'hard': 6,
}
"""
Word length per difficulty level.
Type: Final[Dict[str, int]] - Immutable to prevent accidental modification
"""

EXTRA_ATTEMPTS: Final[int] = 1
"""
Attempts granted on top of the word length (a 5-letter word allows 6 guesses).
"""


def get_word_length(difficulty: str) -> int:
    """
    Resolves the word length for a difficulty level.

    Raises:
        InvalidGameSettings: If the difficulty is unknown
    """
    if not isinstance(difficulty, str) or difficulty not in DIFFICULTY_WORD_LENGTHS:
        valid = ', '.join(DIFFICULTY_WORD_LENGTHS)
        raise InvalidGameSettings(f"Invalid difficulty '{difficulty}'. Must be one of: {valid}")
    return DIFFICULTY_WORD_LENGTHS[difficulty]


def get_max_attempts(word_length: int) -> int:
    """Number of guesses allowed for a word of the given length."""
    return word_length + EXTRA_ATTEMPTS


def validate_language(language: str) -> str:
    """
    Validates a language tag against the supported languages.

    Raises:
        InvalidGameSettings: If the language is not supported
    """
    if not isinstance(language, str) or language not in SUPPORTED_LANGUAGES:
        valid = ', '.join(SUPPORTED_LANGUAGES)
        raise InvalidGameSettings(f"Invalid language '{language}'. Must be one of: {valid}")
    return language


def get_settings_catalog() -> Dict[str, List[Dict]]:
    """
    Describes every selectable option for settings screens.

    Returns:
        dict: Languages and difficulties including word length and attempts
    """
    return {
        'languages': [
            {'code': code, 'name': name} for code, name in SUPPORTED_LANGUAGES.items()
        ],
        'difficulties': [
            {
                'code': difficulty,
                'word_length': length,
                'max_attempts': get_max_attempts(length),
            }
            for difficulty, length in DIFFICULTY_WORD_LENGTHS.items()
        ],
    }
