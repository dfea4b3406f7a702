from .outcomes import GameStart, GuessOutcome, AlreadyTried, GuessResult
from .client import HangmanClient, GameServiceError
from .local import LocalGameService

__all__ = [
    "GameStart", "GuessOutcome", "AlreadyTried", "GuessResult",
    "HangmanClient", "GameServiceError", "LocalGameService",
]
