"""
Guess Evaluator

Pure comparison of one guess against one target word of the same length.
"""

from enum import Enum
from typing import List, Optional

from ..errors import InvalidGuessLength
from ..models.game import LetterStatus


class EvaluationMode(Enum):
    """
    Duplicate-letter policy used when marking PRESENT letters.

    LENIENT does not reserve target letters: every guessed letter that occurs
    anywhere in the target is PRESENT, even when the guess repeats it more often
    than the target does. STANDARD consumes each target letter at most once.
    """
    LENIENT = "lenient"
    STANDARD = "standard"


def evaluate(guess: str, target: str, mode: EvaluationMode = EvaluationMode.LENIENT) -> List[LetterStatus]:
    """
    Evaluates a guess against the target word.

    Args:
        guess: Guessed word (case-insensitive)
        target: Target word (case-insensitive)
        mode: Duplicate-letter policy

    Returns:
        List[LetterStatus]: One status per position

    Raises:
        InvalidGuessLength: If the words differ in length
    """
    guess = guess.upper()
    target = target.upper()

    if len(guess) != len(target):
        raise InvalidGuessLength(len(target), len(guess))

    if mode == EvaluationMode.STANDARD:
        return _evaluate_standard(guess, target)

    result = []
    for position, letter in enumerate(guess):
        if target[position] == letter:
            result.append(LetterStatus.CORRECT)
        elif letter in target:
            result.append(LetterStatus.PRESENT)
        else:
            result.append(LetterStatus.ABSENT)
    return result


def _evaluate_standard(guess: str, target: str) -> List[LetterStatus]:
    """Two-pass evaluation where every target letter can be matched only once."""
    result: List[Optional[LetterStatus]] = []
    remaining: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for position, letter in enumerate(guess):
        if remaining[position] == letter:
            result.append(LetterStatus.CORRECT)
            remaining[position] = None
        else:
            result.append(None)

    # Second pass: present letters and misses
    for position, letter in enumerate(guess):
        if result[position] is not None:
            continue
        if letter in remaining:
            result[position] = LetterStatus.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[position] = LetterStatus.ABSENT

    return [status for status in result if status is not None]
