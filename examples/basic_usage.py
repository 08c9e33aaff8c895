"""
Basic usage of wordvec.

Demonstrates how to:
- Write a tiny model in the word2vec binary format
- Load it back (vectors are normalized at load time)
- Look up words and query nearest neighbours
- Use the hashed resolver instead of the linear scan

Prerequisites:
    pip install wordvec
"""

import io

from wordvec import EmbeddingModel, QueryError, write_model


def main() -> None:
    # -- Build a model in memory ----------------------------------------------
    buffer = io.BytesIO()
    write_model(
        buffer,
        ["the", "cat", "dog", "kitten"],
        [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.1],
            [0.0, 0.9, 0.3],
            [0.1, 1.0, 0.0],
        ],
    )
    buffer.seek(0)

    # The stream belongs to the caller: parse() reads it and leaves it open.
    model = EmbeddingModel.parse(buffer)
    print(f"Loaded {model.vocabulary_length} words, {model.vector_dimensionality} dimensions")

    # -- Lookup -----------------------------------------------------------------
    print(f"index of 'cat': {model.index_of('cat')}")
    print(f"index of 'cow': {model.index_of('cow')}")

    # -- Queries ----------------------------------------------------------------
    for word, score in model.nearest_neighbors(["cat"], neighbors_count=2).as_dict().items():
        print(f"  {word}: {score:.4f}")

    # Several terms are summed into one composite query vector.
    result = model.nearest_neighbors(["cat", "dog"], neighbors_count=5, index_resolver=model.word_index())
    print(f"cat + dog -> {result.words()}")

    try:
        model.nearest_neighbors(["cow"])
    except QueryError as e:
        print(f"Query failed: {e}")


if __name__ == "__main__":
    main()
