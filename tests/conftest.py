import io
import struct

import pytest

from wordvec import EmbeddingModel


def model_bytes(vocabulary: list[bytes | str], vectors: list[list[float]], header: bytes | None = None) -> bytes:
    """Build a model file by hand (independent of wordvec.writer)."""
    dim = len(vectors[0]) if vectors else 0
    out = header if header is not None else f"{len(vocabulary)} {dim}\n".encode("ascii")
    for word, vec in zip(vocabulary, vectors):
        raw = word.encode("utf-8") if isinstance(word, str) else word
        out += raw + b" " + struct.pack(f"<{len(vec)}f", *vec) + b"\n"
    return out


# the / cat / dog example: dog (0, 0.99) normalizes onto cat (0, 1)
ANIMALS_VOCAB = ["the", "cat", "dog"]
ANIMALS_VECTORS = [[1.0, 0.0], [0.0, 1.0], [0.0, 0.99]]

# a slightly richer model for ranking tests
PETS_VOCAB = ["the", "cat", "dog", "kitten", "puppy", "car", "truck"]
PETS_VECTORS = [
    [0.1, 0.1, 0.1, 0.9],
    [1.0, 0.2, 0.0, 0.0],
    [0.2, 1.0, 0.0, 0.0],
    [0.9, 0.1, 0.1, 0.0],
    [0.1, 0.9, 0.1, 0.0],
    [0.0, 0.0, 1.0, 0.1],
    [0.0, 0.1, 0.9, 0.2],
]


@pytest.fixture
def animals_bytes() -> bytes:
    return model_bytes(ANIMALS_VOCAB, ANIMALS_VECTORS)


@pytest.fixture
def animals_model(animals_bytes) -> EmbeddingModel:
    return EmbeddingModel.parse(io.BytesIO(animals_bytes))


@pytest.fixture
def pets_model() -> EmbeddingModel:
    return EmbeddingModel.parse(io.BytesIO(model_bytes(PETS_VOCAB, PETS_VECTORS)))
