"""
Wordvec - Nearest-neighbour engine
Exact brute-force cosine search over a loaded EmbeddingModel.

Steps:
  1. Resolve every search term to an index (all or nothing)
  2. Sum the stored unit vectors and renormalize -> composite query vector
  3. Score every vocabulary entry except the query indices (dot product)
  4. Keep the best `neighbors_count` in a fixed-capacity RankingTable

Pure function of (model, terms, count): identical inputs give identical output.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Sequence

import numpy as np
from pydantic import ValidationError

from . import config
from .errors import InvalidArgument, QueryError
from .model import EmbeddingModel
from .models import Neighbor, NeighborQuery, NeighborResult
from .vector_math import DTYPE, normalize, scores

logger = logging.getLogger(__name__)

IndexResolver = Callable[[str], "int | None"]


# ── Ranking table ────────────────────────────────────────────────────────────


class RankingTable:
    """
    Bounded table of the best (index, score) pairs seen so far, best first.
    Slots start empty with score 0.0; a candidate must be strictly greater
    than a slot's score to take it, so equal scores keep scan order.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise InvalidArgument("Ranking table capacity must be positive")
        self.capacity = capacity
        self._scores: list[float] = [0.0] * capacity
        self._indices: list[int | None] = [None] * capacity

    def offer(self, index: int, score: float) -> bool:
        """Insert the candidate at its rank, shifting lower slots down. Returns True if kept."""
        if not score > self._scores[-1]:
            return False

        for rank in range(self.capacity):
            if score > self._scores[rank]:
                self._scores[rank + 1 :] = self._scores[rank:-1]
                self._indices[rank + 1 :] = self._indices[rank:-1]
                self._scores[rank] = score
                self._indices[rank] = index
                return True
        return False

    def entries(self) -> list[tuple[int, float]]:
        """Filled slots only, best first."""
        return [(i, s) for i, s in zip(self._indices, self._scores) if i is not None]


# ── Query steps ──────────────────────────────────────────────────────────────


def _validate(search_terms: Sequence[str], neighbors_count: int) -> NeighborQuery:
    try:
        return NeighborQuery(search_terms=search_terms, neighbors_count=neighbors_count)
    except ValidationError as e:
        raise InvalidArgument("Invalid query", detail=e.errors()) from e


def _resolve(model: EmbeddingModel, terms: list[str], index_resolver: IndexResolver) -> list[int]:
    indices: list[int] = []
    for term in terms:
        index = index_resolver(term)
        if index is None:
            raise QueryError(f"Out of dictionary word: {term}", detail={"term": term})
        if isinstance(index, bool):
            raise QueryError(f"Resolver returned a non-integer index for {term!r}: {index!r}", detail={"term": term})
        try:
            index = operator.index(index)
        except TypeError as e:
            raise QueryError(f"Resolver returned a non-integer index for {term!r}: {index!r}", detail={"term": term}) from e
        if not 0 <= index < model.vocabulary_length:
            raise QueryError(f"Resolver returned an invalid index for {term!r}: {index}", detail={"term": term})
        indices.append(index)
    return indices


def _query_vector(model: EmbeddingModel, indices: list[int]) -> np.ndarray:
    query = np.zeros(model.vector_dimensionality, dtype=DTYPE)
    # one addition per term occurrence: a repeated term weighs twice
    for index in indices:
        query += model.vector_table[index]

    if not normalize(query):
        raise QueryError("Search terms cancel out: composite vector has zero length")
    return query


# ── Public API ───────────────────────────────────────────────────────────────


def nearest_neighbors(
    model: EmbeddingModel,
    search_terms: Sequence[str],
    neighbors_count: int = config.DEFAULT_NEIGHBORS_COUNT,
    *,
    index_resolver: IndexResolver | None = None,
) -> NeighborResult:
    """
    Return up to `neighbors_count` words closest to the combined search terms.

    `index_resolver` maps a word to its vocabulary index (or None); defaults to
    the model's linear scan. Pass `model.word_index()` for hashed lookups.
    Raises InvalidArgument for bad arguments and QueryError for unknown terms or
    a degenerate composite vector. Never returns a partial result.
    """
    query = _validate(search_terms, neighbors_count)
    resolver = index_resolver if index_resolver is not None else model.index_of

    indices = _resolve(model, query.search_terms, resolver)
    query_vec = _query_vector(model, indices)

    similarities = scores(model.vector_table, query_vec)
    excluded = set(indices)

    table = RankingTable(query.neighbors_count)
    # slots start at 0.0, so only positive scores can ever be kept
    for index in np.flatnonzero(similarities > 0.0).tolist():
        if index in excluded:
            continue
        table.offer(index, float(similarities[index]))

    neighbors: list[Neighbor] = []
    seen: set[str] = set()
    for index, score in table.entries():
        word = model.vocabulary[index]
        if word in seen:
            continue  # duplicate surface form ranked lower
        seen.add(word)
        # trusted values: skip validation so surrogate-escaped words pass through
        neighbors.append(Neighbor.model_construct(word=word, score=score))

    logger.debug(
        "Query terms=%d candidates=%d results=%d",
        len(indices),
        model.vocabulary_length - len(excluded),
        len(neighbors),
    )
    return NeighborResult.model_construct(neighbors=neighbors)
