"""
Next-letter selection (summed letter frequency).

Idea:
  - Build a letter histogram over the CURRENT candidate set (already filtered
    by past feedback), counting every occurrence.
  - Zero out letters already submitted this game.
  - Pick the letter with the highest count; ties go to the alphabetically
    first letter so the same inputs always give the same guess.

This is a frequency heuristic, not an information-optimal one: it favors the
letter most likely to be present, not the one that best splits the set.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .errors import NoCandidateWordsError, NoUnguessedLettersError
from .frequency import frequency_of, merge


def choose_letter(candidates: Sequence[str], already_guessed: Iterable[str]) -> str:
    """
    Return the most frequent not-yet-guessed letter across `candidates`.

    Raises:
      NoCandidateWordsError   : `candidates` is empty
      NoUnguessedLettersError : every letter of the candidates was tried
    """
    if not candidates:
        raise NoCandidateWordsError("no candidate word is consistent with the constraints")

    counts = merge(frequency_of(w) for w in candidates)
    guessed = set(already_guessed)
    for letter in guessed:
        counts[letter] = 0

    pool = [letter for letter in counts if letter not in guessed]
    if not pool:
        raise NoUnguessedLettersError(
            f"all letters of {len(candidates)} candidate(s) were already guessed")

    # max count first, then lexicographic
    return min(pool, key=lambda letter: (-counts[letter], letter))
