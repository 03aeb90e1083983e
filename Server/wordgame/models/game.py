"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class LetterStatus(Enum):
    """Per-position classification of a guessed letter against the target."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class SessionStatus(Enum):
    """Lifecycle of a single game round."""
    AWAITING_WORD = "awaiting_word"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.WON, SessionStatus.LOST)


@dataclass(frozen=True)
class EvaluatedGuess:
    """A submitted guess together with one status per letter."""
    guess: str
    statuses: Tuple[LetterStatus, ...]

    @property
    def is_correct(self) -> bool:
        return all(status == LetterStatus.CORRECT for status in self.statuses)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs with status as string for JSON serialization."""
        return [(letter, status.value) for letter, status in zip(self.guess, self.statuses)]


@dataclass
class GameState:
    """Client-facing game state representation."""
    game_id: str
    language: str
    difficulty: str
    word_length: int
    max_attempts: int
    status: str
    attempts_used: int
    attempts_remaining: int
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]
    latest_guess_index: Optional[int] = None
    answer: Optional[str] = None  # Only included when the round is over
