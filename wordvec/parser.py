"""
Wordvec - Model parser
Deserializes the word2vec binary format into an EmbeddingModel.

Format:
  <vocabulary_length> <vector_dimensionality>\\n
  <word> <float32 x dim, little-endian>\\n      (repeated vocabulary_length times)

Strategy:
  - Reads through an internal buffer, never seeks and never closes the stream
  - Every vector is normalized as soon as its record is complete
  - Partial tables live in locals only: any failure raises ParseError and
    nothing half-built escapes
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np

from . import config
from .errors import ParseError
from .model import EmbeddingModel
from .vector_math import DTYPE, normalize

logger = logging.getLogger(__name__)

_FLOAT32_LE = np.dtype("<f4")
_WHITESPACE = b" \t\n\v\f\r"
_DIGITS = b"0123456789"
_SPACE = 0x20
_NEWLINE = 0x0A


# ── Buffered byte reader ─────────────────────────────────────────────────────


class _ByteReader:
    """Forward-only reader with its own buffer (works with raw and unseekable streams)."""

    def __init__(self, stream: BinaryIO, chunk_size: int = config.READ_CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = max(1, chunk_size)
        self._buffer = b""
        self._pos = 0
        self._eof = False

    def _fill(self) -> bool:
        """Append one chunk to the buffer. Returns False at end of stream."""
        if self._eof:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        self._buffer = self._buffer[self._pos :] + bytes(chunk)
        self._pos = 0
        return True

    def peek_byte(self) -> int | None:
        while self._pos >= len(self._buffer):
            if not self._fill():
                return None
        return self._buffer[self._pos]

    def read_byte(self) -> int | None:
        byte = self.peek_byte()
        if byte is not None:
            self._pos += 1
        return byte

    def read_exact(self, size: int) -> bytes | None:
        """Read exactly `size` bytes, or None on a short read."""
        while len(self._buffer) - self._pos < size:
            if not self._fill():
                return None
        data = self._buffer[self._pos : self._pos + size]
        self._pos += size
        return data

    def read_until(self, delimiter: int) -> bytes:
        """Read up to and including `delimiter`; shorter (no delimiter) at end of stream."""
        start = self._pos
        while True:
            found = self._buffer.find(delimiter, start)
            if found >= 0:
                data = self._buffer[self._pos : found + 1]
                self._pos = found + 1
                return data
            start = len(self._buffer) - self._pos
            if not self._fill():
                data = self._buffer[self._pos :]
                self._pos = len(self._buffer)
                return data


# ── Framing ──────────────────────────────────────────────────────────────────


def _read_integer(reader: _ByteReader) -> int:
    """Scan a decimal integer like `%d`: skip whitespace, optional sign, digits."""
    byte = reader.peek_byte()
    while byte is not None and byte in _WHITESPACE:
        reader.read_byte()
        byte = reader.peek_byte()

    sign = 1
    if byte is not None and byte in b"+-":
        sign = -1 if byte == ord("-") else 1
        reader.read_byte()
        byte = reader.peek_byte()

    digits = bytearray()
    while byte is not None and byte in _DIGITS:
        digits.append(reader.read_byte())
        byte = reader.peek_byte()

    if not digits:
        raise ParseError("Invalid header: expected a decimal integer")
    return sign * int(digits)


def _read_header(reader: _ByteReader) -> tuple[int, int]:
    vocabulary_length = _read_integer(reader)
    vector_dimensionality = _read_integer(reader)

    if reader.read_byte() != _NEWLINE:
        raise ParseError("Invalid header: expected a single newline terminator")

    if vocabulary_length <= 0 or vector_dimensionality <= 0:
        raise ParseError(
            "Invalid header: sizes must be positive",
            detail={"vocabulary_length": vocabulary_length, "vector_dimensionality": vector_dimensionality},
        )

    return vocabulary_length, vector_dimensionality


def _read_word(reader: _ByteReader, record: int) -> bytes:
    token = reader.read_until(_SPACE)
    # at least one content byte plus the trailing space
    if len(token) < 2 or token[-1] != _SPACE:
        raise ParseError(f"Record {record}: missing space-terminated word", detail={"record": record})
    return token[:-1]


def _decode_word(raw: bytes, record: int, encoding: str, validate_encoding: bool) -> str:
    if not validate_encoding:
        return raw.decode(encoding, errors="surrogateescape")
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"Record {record}: word is not valid {encoding}", detail={"record": record}) from e


# ── Public API ───────────────────────────────────────────────────────────────


def parse(
    stream: BinaryIO,
    *,
    encoding: str = config.DEFAULT_ENCODING,
    validate_encoding: bool = config.VALIDATE_ENCODING,
) -> EmbeddingModel:
    """
    Parse one model from a binary stream positioned at its start.
    The stream is owned by the caller: it is read, never sought or closed.
    Raises ParseError on any framing violation or a vector that cannot be normalized.
    """
    reader = _ByteReader(stream)
    vocabulary_length, vector_dimensionality = _read_header(reader)
    logger.debug("Header: vocabulary_length=%d vector_dimensionality=%d", vocabulary_length, vector_dimensionality)

    vector_bytes = vector_dimensionality * _FLOAT32_LE.itemsize
    vocabulary: list[str] = []
    rows: list[np.ndarray] = []

    for record in range(vocabulary_length):
        raw_word = _read_word(reader, record)

        payload = reader.read_exact(vector_bytes)
        if payload is None:
            raise ParseError(f"Record {record}: truncated vector", detail={"record": record})

        if reader.read_byte() != _NEWLINE:
            raise ParseError(f"Record {record}: missing newline terminator", detail={"record": record})

        vector = np.frombuffer(payload, dtype=_FLOAT32_LE).astype(DTYPE)
        if not normalize(vector):
            raise ParseError(f"Record {record}: vector cannot be normalized (zero or non-finite)", detail={"record": record})

        vocabulary.append(_decode_word(raw_word, record, encoding, validate_encoding))
        rows.append(vector)

    table = np.vstack(rows)
    table.flags.writeable = False
    model = EmbeddingModel(vocabulary=tuple(vocabulary), vector_table=table)
    logger.info(
        "Loaded model (words=%d, dim=%d)",
        model.vocabulary_length,
        model.vector_dimensionality,
    )
    return model


def parse_file(
    path: str | Path,
    *,
    encoding: str = config.DEFAULT_ENCODING,
    validate_encoding: bool = config.VALIDATE_ENCODING,
) -> EmbeddingModel:
    """Convenience wrapper: open `path` in binary mode and parse it."""
    with open(path, "rb") as f:
        return parse(f, encoding=encoding, validate_encoding=validate_encoding)
