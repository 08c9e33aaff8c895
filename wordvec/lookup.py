"""
Wordvec - Vocabulary lookup
Word -> index resolvers with first-match semantics.

The linear scan is the reference behaviour; WordIndex is the hashed alternative
and must agree with it on every word, including duplicated ones.
"""

from __future__ import annotations

from collections.abc import Sequence


def linear_index_of(vocabulary: Sequence[str], word: str) -> int | None:
    """Return the first index whose word equals `word`, or None. O(n)."""
    for i, candidate in enumerate(vocabulary):
        if candidate == word:
            return i
    return None


class WordIndex:
    """Hash-based resolver built once from a vocabulary."""

    def __init__(self, vocabulary: Sequence[str]) -> None:
        self._positions: dict[str, int] = {}
        for i, word in enumerate(vocabulary):
            # later duplicates stay unreachable by name
            self._positions.setdefault(word, i)

    def __call__(self, word: str) -> int | None:
        return self._positions.get(word)

    def __contains__(self, word: object) -> bool:
        return word in self._positions

    def __len__(self) -> int:
        return len(self._positions)
