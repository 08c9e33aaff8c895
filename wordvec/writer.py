"""
Wordvec - Model writer
Serializes vocabulary + vectors in the binary format read by `wordvec.parser`.
Vectors are written as given; normalization happens when the file is loaded.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO

import numpy as np

from . import config
from .errors import InvalidArgument
from .model import EmbeddingModel

_FLOAT32_LE = np.dtype("<f4")


def _encode_word(word: str | bytes, encoding: str) -> bytes:
    raw = word if isinstance(word, bytes) else word.encode(encoding, errors="surrogateescape")
    if not raw:
        raise InvalidArgument("Words must not be empty")
    if b" " in raw:
        raise InvalidArgument(f"Word {word!r} contains a space byte")
    return raw


def write_model(
    stream: BinaryIO,
    vocabulary: Sequence[str | bytes],
    vectors: Sequence[Sequence[float]] | np.ndarray,
    *,
    encoding: str = config.DEFAULT_ENCODING,
) -> int:
    """Write a complete model to `stream`. Returns the number of bytes written."""
    table = np.asarray(vectors, dtype=_FLOAT32_LE)
    if table.ndim != 2 or table.shape[0] != len(vocabulary) or table.shape[0] == 0 or table.shape[1] == 0:
        raise InvalidArgument(
            "Vectors must be a non-empty (vocabulary_length, vector_dimensionality) table",
            detail={"shape": table.shape, "vocabulary_length": len(vocabulary)},
        )

    chunks = [f"{table.shape[0]} {table.shape[1]}\n".encode("ascii")]
    for word, row in zip(vocabulary, table):
        chunks.append(_encode_word(word, encoding) + b" " + row.tobytes() + b"\n")

    data = b"".join(chunks)
    stream.write(data)
    return len(data)


def dump_model(model: EmbeddingModel, stream: BinaryIO, *, encoding: str = config.DEFAULT_ENCODING) -> int:
    """Write a loaded model back out (vectors are already unit length)."""
    return write_model(stream, model.vocabulary, model.vector_table, encoding=encoding)
