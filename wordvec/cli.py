"""
Wordvec - CLI entry point
Usage: wordvec-distance VECTOR_FILE TERM [TERM ...] [--neighbors-count N] [--log-level LEVEL]

Similar to word2vec's `distance` program: prints the neighbours of the combined terms.
"""

import argparse
import logging
import sys

from . import config
from .errors import WordVecError
from .parser import parse_file


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="wordvec-distance",
        description="Nearest neighbours of one or more words in a word2vec binary model.",
    )
    parser.add_argument("vector_file", help="Path to the binary vector file")
    parser.add_argument("terms", nargs="+", help="Search terms (combined into one query)")
    parser.add_argument(
        "--neighbors-count",
        type=int,
        default=config.CLI_NEIGHBORS_COUNT,
        help=f"Number of neighbours to show (default: {config.CLI_NEIGHBORS_COUNT}, env WORDVEC_NEIGHBORS_COUNT)",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, choices=["debug", "info", "warning", "error"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.neighbors_count <= 0:
        print("Error: --neighbors-count must be positive", file=sys.stderr)
        sys.exit(1)

    try:
        model = parse_file(args.vector_file)
    except OSError as e:
        print(f"Error: cannot open {args.vector_file}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)
    except WordVecError as e:
        print(f"Error: cannot parse {args.vector_file}: {e}", file=sys.stderr)
        sys.exit(1)

    resolver = model.word_index()
    known_terms = [term for term in args.terms if resolver(term) is not None]
    if not known_terms:
        print("None of the provided terms existed in the model...aborting", file=sys.stderr)
        sys.exit(1)

    print("### Terms in model")
    print()
    for term in known_terms:
        print(f"*   `{term}`: `{resolver(term)}`")

    try:
        result = model.nearest_neighbors(known_terms, args.neighbors_count, index_resolver=resolver)
    except WordVecError as e:
        print(f"Error: query failed: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    print("### Neighbors")
    print()
    for neighbor in result.neighbors:
        print(f"*   `{neighbor.word}`: `{neighbor.score}`")


if __name__ == "__main__":
    main()
