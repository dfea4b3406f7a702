"""
HTTP client for the hangman game service.

Protocol:
  POST <api>                         -> {"hangman": "_____", "token": "..."}
  PUT  <api>  letter=<l>&token=<t>   -> {"hangman": "_a___", "correct": true, "token": "..."}
                                        or HTTP 304 if <l> was already tried

Transport failures (connection errors, timeouts, 4xx/5xx via
raise_for_status) are left to propagate as `requests` exceptions; the caller
decides whether to retry the whole game. A reply that parses but lacks the
fields above raises `GameServiceError`.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from hangmanai import settings
from .outcomes import AlreadyTried, GameStart, GuessOutcome, GuessResult

log = logging.getLogger(__name__)


class GameServiceError(RuntimeError):
    """The service answered, but not with a usable game payload."""


class HangmanClient:
    """Talks to one hangman service endpoint over a shared requests.Session."""

    def __init__(self, base_url: str = settings.HANGMAN_API_URI, *,
                 timeout: float = settings.REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _payload(self, response: requests.Response, *keys: str) -> dict:
        try:
            data = response.json()
        except ValueError as e:
            raise GameServiceError(f"non-JSON reply from {self.base_url}") from e
        if not isinstance(data, dict):
            raise GameServiceError(f"unexpected reply from {self.base_url}: {data!r}")
        missing = [k for k in keys if k not in data]
        if missing:
            raise GameServiceError(f"reply from {self.base_url} lacks {missing}: {data!r}")
        return data

    def start_game(self) -> GameStart:
        log.debug("POST %s", self.base_url)
        response = self.session.post(self.base_url, timeout=self.timeout)
        response.raise_for_status()
        data = self._payload(response, "hangman", "token")
        return GameStart(masked=data["hangman"], token=data["token"])

    def check_guess(self, letter: str, token: str) -> GuessResult:
        log.debug("PUT %s letter=%s", self.base_url, letter)
        response = self.session.put(
            self.base_url,
            data={"letter": letter, "token": token},
            timeout=self.timeout,
        )
        # 304 Not Modified: the letter was submitted earlier in this game
        if response.status_code == 304:
            return AlreadyTried(letter)
        response.raise_for_status()
        data = self._payload(response, "hangman", "correct")
        return GuessOutcome(
            letter=letter,
            correct=bool(data["correct"]),
            masked=data["hangman"],
            token=data.get("token"),
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HangmanClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
