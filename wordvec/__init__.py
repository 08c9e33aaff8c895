# Wordvec package

from .config import DEFAULT_NEIGHBORS_COUNT
from .config import VERSION as __version__
from .engine import RankingTable, nearest_neighbors
from .errors import InvalidArgument, ParseError, QueryError, WordVecError
from .lookup import WordIndex, linear_index_of
from .model import EmbeddingModel
from .models import Neighbor, NeighborQuery, NeighborResult
from .parser import parse, parse_file
from .writer import dump_model, write_model

__all__ = [
    "__version__",
    "DEFAULT_NEIGHBORS_COUNT",
    "EmbeddingModel",
    "parse",
    "parse_file",
    "nearest_neighbors",
    "RankingTable",
    "WordIndex",
    "linear_index_of",
    "Neighbor",
    "NeighborQuery",
    "NeighborResult",
    "write_model",
    "dump_model",
    "WordVecError",
    "ParseError",
    "QueryError",
    "InvalidArgument",
]
