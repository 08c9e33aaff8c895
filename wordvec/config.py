"""
Wordvec - Centralized configuration
All environment variables and constants in a single place.
"""

import os

# ── Queries ───────────────────────────────────────────────────────────────────

# Library default, same as the word2vec `distance` program
DEFAULT_NEIGHBORS_COUNT = 40

# The CLI shows a shorter list unless told otherwise
CLI_NEIGHBORS_COUNT = int(os.getenv("WORDVEC_NEIGHBORS_COUNT") or "10")

# ── Parser ────────────────────────────────────────────────────────────────────

DEFAULT_ENCODING = os.getenv("WORDVEC_ENCODING", "utf-8")
VALIDATE_ENCODING = os.getenv("WORDVEC_VALIDATE_ENCODING", "0") == "1"
READ_CHUNK_SIZE = int(os.getenv("WORDVEC_READ_CHUNK_SIZE") or "65536")

# ── Logging ───────────────────────────────────────────────────────────────────

LOG_LEVEL = os.getenv("WORDVEC_LOG_LEVEL", "warning")

# ── Version ───────────────────────────────────────────────────────────────────

VERSION = "1.0.0"
