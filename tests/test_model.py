"""
Wordvec - EmbeddingModel tests
Lookup, immutability, cached introspection views.
"""

import dataclasses
import io
import threading

import numpy as np
import pytest
from conftest import PETS_VOCAB, model_bytes

from wordvec import EmbeddingModel, InvalidArgument, WordIndex, linear_index_of, parse


class TestIndexOf:
    def test_known_words(self, pets_model):
        for i, word in enumerate(PETS_VOCAB):
            assert pets_model.index_of(word) == i

    def test_unknown_word(self, pets_model):
        assert pets_model.index_of("horse") is None

    def test_comparison_is_exact(self, pets_model):
        assert pets_model.index_of("Cat") is None
        assert pets_model.index_of("cat ") is None

    def test_duplicates_resolve_to_first(self):
        model = parse(io.BytesIO(model_bytes(["a", "b", "a"], [[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])))
        assert model.index_of("a") == 0
        assert model.word_index()("a") == 0

    def test_word_index_agrees_with_linear_scan(self, pets_model):
        index = pets_model.word_index()
        for word in PETS_VOCAB + ["horse", ""]:
            assert index(word) == pets_model.index_of(word) == linear_index_of(PETS_VOCAB, word)

    def test_word_index_is_built_once(self, pets_model):
        assert isinstance(pets_model.word_index(), WordIndex)
        assert pets_model.word_index() is pets_model.word_index()


class TestImmutability:
    def test_fields_cannot_be_reassigned(self, animals_model):
        with pytest.raises(dataclasses.FrozenInstanceError):
            animals_model.vocabulary = ("x",)

    def test_caller_table_is_copied(self):
        table = np.array([[1.0, 0.0], [0.0, 1.0]], dtype=np.float32)
        model = EmbeddingModel(vocabulary=("a", "b"), vector_table=table)
        table[0, 0] = 42.0
        assert model.vector_table[0, 0] == 1.0

    def test_vector_returns_a_copy(self, animals_model):
        vec = animals_model.vector("cat")
        vec[0] = 9.0
        assert animals_model.vector("cat").tolist() == [0.0, 1.0]
        assert animals_model.vector("cow") is None

    def test_concurrent_queries(self, pets_model):
        expected = pets_model.nearest_neighbors(["cat"], 3)
        results = []

        def worker():
            results.append(pets_model.nearest_neighbors(["cat"], 3))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(r == expected for r in results)


class TestConstructionChecks:
    def test_empty_vocabulary(self):
        with pytest.raises(InvalidArgument):
            EmbeddingModel(vocabulary=(), vector_table=np.zeros((0, 2), dtype=np.float32))

    def test_shape_mismatch(self):
        with pytest.raises(InvalidArgument):
            EmbeddingModel(vocabulary=("a", "b"), vector_table=np.ones((3, 2), dtype=np.float32))

    def test_zero_dimensionality(self):
        with pytest.raises(InvalidArgument):
            EmbeddingModel(vocabulary=("a",), vector_table=np.ones((1, 0), dtype=np.float32))

    def test_empty_word(self):
        with pytest.raises(InvalidArgument):
            EmbeddingModel(vocabulary=("a", ""), vector_table=np.ones((2, 2), dtype=np.float32))

    def test_list_vocabulary_becomes_tuple(self):
        model = EmbeddingModel(vocabulary=["a"], vector_table=[[1.0, 0.0]])
        assert model.vocabulary == ("a",)


class TestIntrospection:
    def test_shape_accessors(self, pets_model):
        assert pets_model.vocabulary_length == 7
        assert pets_model.vector_dimensionality == 4

    def test_vectors_view(self, animals_model):
        vectors = animals_model.vectors
        assert isinstance(vectors, tuple)
        assert vectors[0] == (1.0, 0.0)
        assert vectors[1] == (0.0, 1.0)
        assert len(vectors) == animals_model.vocabulary_length

    def test_vectors_view_is_cached(self, animals_model):
        assert animals_model.vectors is animals_model.vectors

    def test_repr(self, animals_model):
        assert repr(animals_model) == "EmbeddingModel(vocabulary_length=3, vector_dimensionality=2)"
