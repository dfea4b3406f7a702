"""
Errors raised by the guessing engine and the game session.

All of them are fatal to the game in progress: they mean the accumulated
constraints no longer agree with any corpus word (or the session was misused),
so no sensible next letter exists.
"""


class HangmanError(Exception):
    """Base class for internal game errors."""


class InvalidLengthError(HangmanError, ValueError):
    """Word length is not a positive integer."""


class NoCandidateWordsError(HangmanError):
    """No corpus word is consistent with the known constraints."""


class NoUnguessedLettersError(NoCandidateWordsError):
    """Candidates remain, but every one of their letters was already tried."""


class GameOverError(HangmanError):
    """A guess was requested after the game reached a terminal state."""
