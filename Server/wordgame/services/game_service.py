"""
Game Service

Manages game sessions: settings resolution, target word fetching and
guess submission.
"""

import uuid
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import get_max_attempts, get_word_length, validate_language
from ..errors import GameNotFound, SessionNotActive, WordFetchFailed
from ..game.evaluator import EvaluationMode
from ..game.session import GameSession
from ..models.game import EvaluatedGuess, GameState, SessionStatus
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_word
from .word_provider import WordProvider


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target word selection through the configured word provider
    - Guess validation and submission
    - Game state snapshots that only reveal the answer once a round is over
    """

    def __init__(self, word_provider: WordProvider, evaluation_mode: EvaluationMode = EvaluationMode.LENIENT):
        self.word_provider = word_provider
        self.evaluation_mode = evaluation_mode
        self.games: Dict[str, Dict] = {}  # Store games by game_id

    def create_new_game(self, language: str, difficulty: str) -> str:
        """
        Registers a new game waiting for its target word.

        Args:
            language: Language tag for the word provider
            difficulty: Difficulty level ("easy", "medium", "hard")

        Returns:
            str: Unique game ID for this session

        Raises:
            InvalidGameSettings: If language or difficulty is unknown
        """
        validate_language(language)
        word_length = get_word_length(difficulty)

        game_id = str(uuid.uuid4())
        self.games[game_id] = {
            "session": GameSession(self.evaluation_mode),
            "language": language,
            "difficulty": difficulty,
            "word_length": word_length,
            "max_attempts": get_max_attempts(word_length),
            "rounds_started": 0,
            "last_activity": datetime.now(),
        }
        return game_id

    def start_round(self, game_id: str) -> GameState:
        """
        Fetches a new target word and starts a fresh round.

        Used both for the first round and for resets. The session is only
        touched once the word has been fetched, so a failed fetch leaves the
        previous state intact.

        Raises:
            GameNotFound: If the game does not exist
            WordFetchFailed: If the word provider fails
        """
        game = self._get_game(game_id)

        try:
            target_word = self.word_provider.fetch_word(game["language"], game["word_length"])
        except WordFetchFailed as e:
            game_logger.log_game_event(
                game_id, 'word_fetch_failed',
                language=game["language"], word_length=game["word_length"],
                error=str(e)
            )
            raise

        game["session"].start_new_round(target_word, game["max_attempts"])
        game["rounds_started"] += 1
        game["last_activity"] = datetime.now()

        game_logger.log_game_event(
            game_id, 'round_started',
            language=game["language"], difficulty=game["difficulty"],
            round=game["rounds_started"]
        )
        return self.get_game_state(game_id)

    def retry_word_fetch(self, game_id: str) -> GameState:
        """
        Retries the initial word fetch of a game still awaiting its word.

        Raises:
            GameNotFound: If the game does not exist
            SessionNotActive: If the game already has a target word
            WordFetchFailed: If the word provider fails again
        """
        session = self._get_game(game_id)["session"]
        if session.status != SessionStatus.AWAITING_WORD:
            raise SessionNotActive(session.status)
        return self.start_round(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        session: GameSession = game["session"]
        awaiting = session.status == SessionStatus.AWAITING_WORD

        return GameState(
            game_id=game_id,
            language=game["language"],
            difficulty=game["difficulty"],
            word_length=game["word_length"],
            max_attempts=game["max_attempts"],
            status=session.status.value,
            attempts_used=0 if awaiting else session.attempts_used,
            attempts_remaining=game["max_attempts"] if awaiting else session.attempts_remaining,
            guesses=[evaluated.guess for evaluated in session.guesses],
            guess_results=[evaluated.as_pairs() for evaluated in session.guesses],
            latest_guess_index=session.latest_guess_index,
            answer=session.target if session.status.is_terminal else None,
        )

    def is_valid_guess(self, guess) -> Tuple[bool, str]:
        """
        Checks the shape of a guess before it reaches the session.

        Length and game status are enforced by the session itself.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        if not normalize_word(guess).isalpha():
            return False, "Guess must contain only letters"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Tuple[EvaluatedGuess, GameState]:
        """
        Submits a guess to the game's session.

        Returns:
            Tuple of the evaluated guess and the updated game state

        Raises:
            GameNotFound: If the game does not exist
            SessionNotActive: If the round is not in progress
            InvalidGuessLength: If the guess has the wrong length
        """
        game = self._get_game(game_id)
        session: GameSession = game["session"]
        evaluated = session.submit_guess(normalize_word(guess))
        game["last_activity"] = datetime.now()
        state = self.get_game_state(game_id)

        if session.status == SessionStatus.WON:
            game_logger.log_game_event(
                game_id, 'game_won',
                attempts_used=session.attempts_used, target_word=session.target
            )
        elif session.status == SessionStatus.LOST:
            game_logger.log_game_event(
                game_id, 'game_lost',
                attempts_used=session.attempts_used, target_word=session.target
            )

        return evaluated, state

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False

    def cleanup_stale_games(self, max_idle_seconds: float, now: Optional[datetime] = None) -> List[str]:
        """
        Removes games without activity for longer than max_idle_seconds.

        Games whose first word fetch failed and were never retried are
        collected here as well.

        Returns:
            List[str]: IDs of the removed games
        """
        cutoff = (now or datetime.now()) - timedelta(seconds=max_idle_seconds)
        stale_ids = [
            game_id for game_id, game in list(self.games.items())
            if game["last_activity"] < cutoff
        ]
        for game_id in stale_ids:
            self.games.pop(game_id, None)
            game_logger.log_game_event(game_id, 'game_expired', max_idle_seconds=max_idle_seconds)
        return stale_ids

    def _get_game(self, game_id: str) -> Dict:
        try:
            return self.games[game_id]
        except KeyError:
            raise GameNotFound(game_id)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_provider: WordProvider,
                            evaluation_mode: EvaluationMode = EvaluationMode.LENIENT) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_provider, evaluation_mode)
    return _game_service
