"""
Values exchanged with a hangman game service.

`check_guess` returns either a `GuessOutcome` or an `AlreadyTried`. A
repeated letter is an ordinary result, not an exception and not a wrong
guess: the caller checks the type and carries on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class GameStart:
    masked: str   # e.g. "_______"
    token: str    # opaque session id


@dataclass(frozen=True)
class GuessOutcome:
    letter: str
    correct: bool
    masked: str
    token: Optional[str] = None  # some services rotate the token per guess


@dataclass(frozen=True)
class AlreadyTried:
    letter: str


GuessResult = Union[GuessOutcome, AlreadyTried]
