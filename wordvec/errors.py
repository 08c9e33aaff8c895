"""
Wordvec - Exceptions
Typed errors raised while loading and querying a model.
"""

from __future__ import annotations

from typing import Any


class WordVecError(Exception):
    """Base error class for wordvec."""

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ParseError(WordVecError):
    """The byte stream does not follow the model file format."""


class QueryError(WordVecError):
    """A query cannot be answered against an otherwise valid model."""


class InvalidArgument(WordVecError, ValueError):
    """The caller passed arguments that no model could accept."""
