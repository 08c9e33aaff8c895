"""
Wordvec - Vector math
float32 helpers shared by the parser and the query engine.

All stored vectors are unit length, so cosine similarity reduces to a dot product.
"""

from __future__ import annotations

import math

import numpy as np

DTYPE = np.float32


def normalize(vector: np.ndarray) -> bool:
    """
    Scale `vector` to unit length in place.
    Returns False (vector untouched) when the squared sum is not positive or not finite.
    """
    wide = vector.astype(np.float64)
    total = float(np.dot(wide, wide))
    if not total > 0.0 or not math.isfinite(total):
        return False

    vector[...] = wide / math.sqrt(total)
    return True


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two vectors = cosine similarity when both are normalized."""
    return float(np.dot(a, b))


def scores(matrix: np.ndarray, query: np.ndarray) -> np.ndarray:
    """Batch dot product: one score per row of `matrix`, shape (n,)."""
    return matrix @ query
