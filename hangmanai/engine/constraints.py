"""
Candidate filtering given what the game has revealed so far.

Given:
  - a pool of words (the corpus)
  - the hidden word length
  - letters known NOT to be in the word (wrong guesses)
  - letters known to be in the word, each pinned to one position

Return:
  - the words consistent with ALL of it, order preserved as in the pool.

The session never edits a candidate list in place: each turn it rebuilds the
list from the full corpus and the current `Constraints`, so the set can only
shrink as constraints accumulate.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional

from .errors import InvalidLengthError


@dataclass(frozen=True)
class Constraints:
    """
    Everything the game has told us, as an immutable value.

    excluded : letters reported wrong
    fixed    : letter -> index where that letter is believed to sit
    """
    excluded: FrozenSet[str] = frozenset()
    fixed: Dict[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        overlap = self.excluded & set(self.fixed)
        if overlap:
            raise ValueError(f"letters both excluded and fixed: {sorted(overlap)}")

    def with_wrong(self, letter: str) -> "Constraints":
        return replace(self, excluded=self.excluded | {letter})

    def with_correct(self, letter: str, index: int) -> "Constraints":
        return replace(self, fixed={**self.fixed, letter: index})

    @property
    def letters(self) -> FrozenSet[str]:
        """Every letter these constraints mention."""
        return self.excluded | frozenset(self.fixed)


def _check_length(length) -> None:
    # bool is an int subclass; True is not a word length
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidLengthError(f"word length must be a positive integer; got {length!r}")


def filter_candidates(
        words: Iterable[str],
        length: int,
        excluded: Iterable[str] = (),
        fixed: Optional[Mapping[str, int]] = None,
) -> List[str]:
    """
    Keep only words of `length` letters that avoid every `excluded` letter
    and carry each `fixed` letter at its index.

    Args:
      words    : iterable of candidate words (often the whole corpus)
      length   : hidden word length, a positive int
      excluded : letters that must not appear anywhere in the word
      fixed    : letter -> required index; empty or None means no positional
                 filtering at all

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).

    Raises:
      InvalidLengthError if `length` is not a positive int.
    """
    _check_length(length)
    excluded = tuple(excluded)
    pinned = tuple((fixed or {}).items())

    out: List[str] = []
    for w in words:
        if len(w) != length:
            continue
        if any(e in w for e in excluded):
            continue
        # An index outside the word (negative or past the end) never matches.
        if all(0 <= i < len(w) and w[i] == letter for letter, i in pinned):
            out.append(w)
    return out
