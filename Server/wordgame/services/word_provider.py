"""
Word Provider Service

Fetches target words from the random-word web API.
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests

from ..errors import WordFetchFailed
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_word


class WordProvider(ABC):
    """Source of target words. Subclasses implement fetch_word()."""

    @abstractmethod
    def fetch_word(self, language: str, length: int) -> str:
        """
        Returns one uppercase word of exactly `length` letters.

        Raises:
            WordFetchFailed: If no suitable word could be obtained
        """


class RandomWordApiProvider(WordProvider):
    """
    Client for random-word-api style services.

    The API does not guarantee the requested length, so words of the wrong
    length are re-rolled up to `max_attempts` requests. Transport errors are
    not retried; they surface immediately as WordFetchFailed.
    """

    def __init__(self,
                 base_url: str = "https://random-word-api.herokuapp.com",
                 timeout: float = 5.0,
                 max_attempts: int = 25,
                 session: Optional[requests.Session] = None):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.http = session or requests.Session()

    def fetch_word(self, language: str, length: int) -> str:
        for attempt in range(1, self.max_attempts + 1):
            word = self._request_word(language, length)
            if len(word) == length and word.isalpha():
                game_logger.logger.debug(
                    f"Fetched {length}-letter word for '{language}' after {attempt} request(s)"
                )
                return word
            game_logger.logger.debug(
                f"Re-rolling word of length {len(word)} (wanted {length}), attempt {attempt}/{self.max_attempts}"
            )

        raise WordFetchFailed(
            f"No {length}-letter word received after {self.max_attempts} requests",
            language=language, length=length
        )

    def _request_word(self, language: str, length: int) -> str:
        """Performs a single API request and returns the normalized word."""
        try:
            response = self.http.get(
                f"{self.base_url}/word",
                params={'lang': language, 'number': 1, 'length': length},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            game_logger.logger.error(f"Could not fetch word from {self.base_url}: {e}")
            raise WordFetchFailed(
                f"Error fetching random word: {e}", language=language, length=length
            ) from e
        except ValueError as e:
            raise WordFetchFailed(
                "Word service returned malformed JSON", language=language, length=length
            ) from e

        if not isinstance(payload, list) or not payload or not isinstance(payload[0], str):
            raise WordFetchFailed(
                f"Unexpected response from word service: {payload!r}", language=language, length=length
            )

        return normalize_word(payload[0])
