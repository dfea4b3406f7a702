from .constraints import Constraints, filter_candidates
from .frequency import frequency_of, merge
from .selection import choose_letter
from .errors import (
    HangmanError,
    InvalidLengthError,
    NoCandidateWordsError,
    NoUnguessedLettersError,
    GameOverError,
)

__all__ = [
    "Constraints", "filter_candidates", "frequency_of", "merge", "choose_letter",
    "HangmanError", "InvalidLengthError", "NoCandidateWordsError",
    "NoUnguessedLettersError", "GameOverError",
]
