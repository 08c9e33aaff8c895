"""
Wordvec - Embedding model
Immutable vocabulary + unit-vector table, shared read-only by any number of queries.

Vectors are stored row-parallel to the vocabulary: row i belongs to word i.
Vocabulary order is the training frequency rank (index 0 = most frequent word).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import numpy as np

from . import config
from .errors import InvalidArgument
from .lookup import WordIndex, linear_index_of
from .vector_math import DTYPE

if TYPE_CHECKING:
    from .models import NeighborResult


@dataclass(frozen=True, eq=False)
class EmbeddingModel:
    """Should (generally) be constructed by `EmbeddingModel.parse` / `parse_file`."""

    vocabulary: tuple[str, ...]
    vector_table: np.ndarray

    def __post_init__(self) -> None:
        if not isinstance(self.vocabulary, tuple):
            object.__setattr__(self, "vocabulary", tuple(self.vocabulary))
        if not self.vocabulary:
            raise InvalidArgument("Vocabulary must not be empty")
        if any(not isinstance(w, str) or not w for w in self.vocabulary):
            raise InvalidArgument("Vocabulary words must be non-empty strings")

        table = np.asarray(self.vector_table, dtype=DTYPE)
        if table.flags.writeable:
            # never share a table the caller can still write to
            table = table.copy()
        if table.ndim != 2 or table.shape[0] != len(self.vocabulary) or table.shape[1] == 0:
            raise InvalidArgument(
                "Vector table must be shaped (vocabulary_length, vector_dimensionality)",
                detail={"shape": table.shape, "vocabulary_length": len(self.vocabulary)},
            )
        table.flags.writeable = False
        object.__setattr__(self, "vector_table", table)

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, stream: BinaryIO, **options) -> EmbeddingModel:
        from .parser import parse

        return parse(stream, **options)

    @classmethod
    def parse_file(cls, path: str | Path, **options) -> EmbeddingModel:
        from .parser import parse_file

        return parse_file(path, **options)

    # ── Shape ────────────────────────────────────────────────────────────────

    @property
    def vocabulary_length(self) -> int:
        return self.vector_table.shape[0]

    @property
    def vector_dimensionality(self) -> int:
        return self.vector_table.shape[1]

    # ── Lookup ───────────────────────────────────────────────────────────────

    def index_of(self, word: str) -> int | None:
        """
        Position of `word` in the vocabulary (descending training frequency), or None.
        Linear scan; duplicates resolve to their first occurrence.
        """
        return linear_index_of(self.vocabulary, word)

    def word_index(self) -> WordIndex:
        """Hashed resolver with the same first-match semantics as `index_of`."""
        return self._word_index

    @cached_property
    def _word_index(self) -> WordIndex:
        return WordIndex(self.vocabulary)

    def vector(self, word: str) -> np.ndarray | None:
        """Copy of the stored unit vector for `word`, or None."""
        index = self._word_index(word)
        if index is None:
            return None
        return self.vector_table[index].copy()

    # ── Introspection ────────────────────────────────────────────────────────

    @cached_property
    def vectors(self) -> tuple[tuple[float, ...], ...]:
        """Plain-Python dump of every vector. Debugging only: costly on real models."""
        return tuple(tuple(row) for row in self.vector_table.tolist())

    # ── Queries ──────────────────────────────────────────────────────────────

    def nearest_neighbors(
        self,
        search_terms: Sequence[str],
        neighbors_count: int = config.DEFAULT_NEIGHBORS_COUNT,
        index_resolver: Callable[[str], int | None] | None = None,
    ) -> NeighborResult:
        from .engine import nearest_neighbors

        return nearest_neighbors(self, search_terms, neighbors_count, index_resolver=index_resolver)

    def __repr__(self) -> str:
        return f"EmbeddingModel(vocabulary_length={self.vocabulary_length}, vector_dimensionality={self.vector_dimensionality})"
