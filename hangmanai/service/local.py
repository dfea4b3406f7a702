"""
In-memory hangman service.

Same interface as `HangmanClient` (start_game / check_guess), but the secret
word is known locally. The harness uses it to replay many games offline, and
tests use it to drive the session without a network.
"""

from __future__ import annotations

import uuid
from typing import Dict, Set

from hangmanai.settings import BLANK
from .client import GameServiceError
from .outcomes import AlreadyTried, GameStart, GuessOutcome, GuessResult


class LocalGameService:
    def __init__(self, secret: str):
        self.secret = secret.strip().lower()
        self._tried: Dict[str, Set[str]] = {}

    def _mask(self, tried: Set[str]) -> str:
        return "".join(ch if ch in tried else BLANK for ch in self.secret)

    def start_game(self) -> GameStart:
        token = uuid.uuid4().hex
        self._tried[token] = set()
        return GameStart(masked=self._mask(set()), token=token)

    def check_guess(self, letter: str, token: str) -> GuessResult:
        try:
            tried = self._tried[token]
        except KeyError as e:
            raise GameServiceError(f"unknown game token: {token}") from e

        letter = letter.lower()
        if letter in tried:
            return AlreadyTried(letter)
        tried.add(letter)
        return GuessOutcome(
            letter=letter,
            correct=letter in self.secret,
            masked=self._mask(tried),
            token=token,
        )
