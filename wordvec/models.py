"""
Wordvec - Pydantic models
Query and result schemas with validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from . import config


class NeighborQuery(BaseModel):
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"search_terms": ["cat"], "neighbors_count": 10},
                {"search_terms": ["king", "woman"], "neighbors_count": 40},
            ]
        },
    }

    search_terms: list[str]
    neighbors_count: int = Field(config.DEFAULT_NEIGHBORS_COUNT, ge=1, strict=True)

    @field_validator("search_terms", mode="plain")
    @classmethod
    def terms_must_be_words(cls, v: Any) -> list[str]:
        # plain: words decoded with surrogateescape must reach the resolver unchanged
        if isinstance(v, (str, bytes)) or not isinstance(v, (list, tuple)):
            raise ValueError("search_terms must be a list of words")
        if not v:
            raise ValueError("search_terms must not be empty")
        if not all(isinstance(term, str) for term in v):
            raise ValueError("search_terms must only contain strings")
        return list(v)


class Neighbor(BaseModel):
    model_config = {"frozen": True}

    word: str
    score: float


class NeighborResult(BaseModel):
    """Ranked neighbours, highest score first."""

    model_config = {"frozen": True}

    neighbors: list[Neighbor] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.neighbors)

    def words(self) -> list[str]:
        return [n.word for n in self.neighbors]

    def as_dict(self) -> dict[str, float]:
        """word -> score, in rank order."""
        return {n.word: n.score for n in self.neighbors}
