"""
Letter frequency tables.

A table maps letter -> raw occurrence count. Merging SUMS counts, so a word
with a repeated letter pulls that letter up twice: "letter" adds 2 to 'e' and
2 to 't'. That is not "number of words containing the letter", and the
difference changes which letter wins, so keep it a plain sum.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping


def frequency_of(word: str) -> Counter[str]:
    """Occurrences of each letter in `word`; values sum to len(word)."""
    return Counter(word)


def merge(frequency_maps: Iterable[Mapping[str, int]]) -> Counter[str]:
    """
    Sum counts letter by letter over the union of keys.

    A letter absent from one map contributes 0 for it. An empty input gives
    an empty table. Zero counts are carried through, so merging a single map
    returns an equal map.
    """
    merged: Counter[str] = Counter()
    for m in frequency_maps:
        for letter, n in m.items():
            # item-wise += keeps zero-valued keys, Counter.__add__ would drop them
            merged[letter] += n
    return merged
