"""
Game Session

State machine for a single player's round: target word, attempt history and
the derived win/loss status.
"""

from typing import List, Optional

from ..errors import InvalidGameSettings, InvalidGuessLength, SessionNotActive
from ..models.game import EvaluatedGuess, SessionStatus
from .evaluator import EvaluationMode, evaluate


class GameSession:
    """
    Owned aggregate holding one round of the game.

    A session starts in AWAITING_WORD until a target word is assigned with
    start_new_round(). Guesses are accepted only while IN_PROGRESS; the round
    ends as WON or LOST. Calling start_new_round() again discards the history
    and starts a fresh round.
    """

    def __init__(self, evaluation_mode: EvaluationMode = EvaluationMode.LENIENT):
        self.evaluation_mode = evaluation_mode
        self._target: Optional[str] = None
        self._max_attempts: Optional[int] = None
        self._guesses: List[EvaluatedGuess] = []
        self._status = SessionStatus.AWAITING_WORD

    def start_new_round(self, target: str, max_attempts: int) -> None:
        """
        Assigns a new target word and clears any previous guesses.

        Args:
            target: Word to guess, any case
            max_attempts: Number of guesses allowed in this round

        Raises:
            InvalidGameSettings: If the target is empty or not alphabetic,
                or max_attempts is below 1
        """
        if not isinstance(max_attempts, int) or isinstance(max_attempts, bool) or max_attempts < 1:
            raise InvalidGameSettings(f"max_attempts must be a positive integer, got {max_attempts!r}")
        if not isinstance(target, str) or not target:
            raise InvalidGameSettings("Target word cannot be empty")
        if not target.isalpha():
            raise InvalidGameSettings(f"Target word '{target}' contains non-alphabetic characters")

        self._target = target.upper()
        self._max_attempts = max_attempts
        self._guesses = []
        self._status = SessionStatus.IN_PROGRESS

    def submit_guess(self, guess: str) -> EvaluatedGuess:
        """
        Evaluates a guess and records it in the attempt history.

        Rejected guesses leave the session untouched.

        Raises:
            SessionNotActive: If the session is not IN_PROGRESS
            InvalidGuessLength: If the guess length differs from the target's
        """
        if self._status != SessionStatus.IN_PROGRESS:
            raise SessionNotActive(self._status)

        normalized_guess = guess.upper()
        if len(normalized_guess) != len(self._target):
            raise InvalidGuessLength(len(self._target), len(normalized_guess))

        evaluated = EvaluatedGuess(
            guess=normalized_guess,
            statuses=tuple(evaluate(normalized_guess, self._target, self.evaluation_mode)),
        )
        self._guesses.append(evaluated)

        # Win check comes first so a correct final guess is a win
        if normalized_guess == self._target:
            self._status = SessionStatus.WON
        elif len(self._guesses) >= self._max_attempts:
            self._status = SessionStatus.LOST

        return evaluated

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def attempts_used(self) -> int:
        self._require_word()
        return len(self._guesses)

    @property
    def attempts_remaining(self) -> int:
        self._require_word()
        return self._max_attempts - len(self._guesses)

    @property
    def guesses(self) -> List[EvaluatedGuess]:
        return list(self._guesses)

    @property
    def latest_guess_index(self) -> Optional[int]:
        """Index of the most recent guess, None before the first one."""
        return len(self._guesses) - 1 if self._guesses else None

    @property
    def word_length(self) -> Optional[int]:
        return len(self._target) if self._target is not None else None

    @property
    def max_attempts(self) -> Optional[int]:
        return self._max_attempts

    @property
    def target(self) -> Optional[str]:
        return self._target

    def _require_word(self) -> None:
        if self._status == SessionStatus.AWAITING_WORD:
            raise SessionNotActive(self._status)
