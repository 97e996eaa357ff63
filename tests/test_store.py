"""Tests for the read-only vector store."""

import numpy as np
import pytest

from motif_neighbors import NotFoundError, VectorStore


class TestVectorStore:
    def test_get_known_code(self):
        store = VectorStore({"x": [1, 0, 1]})
        assert list(store.get("x")) == [1, 0, 1]

    def test_get_unknown_returns_none(self):
        store = VectorStore({"x": [1]})
        assert store.get("nonexistent") is None

    def test_vector_unknown_raises(self):
        store = VectorStore({"x": [1]}, name="motifs")
        with pytest.raises(NotFoundError) as info:
            store.vector("nonexistent")
        assert info.value.code == "nonexistent"
        assert info.value.store == "motifs"

    def test_contains_and_len(self):
        store = VectorStore({"x": [1], "y": [0]})
        assert store.contains("x")
        assert "y" in store
        assert "z" not in store
        assert len(store) == 2

    def test_iterates_in_sorted_order(self):
        store = VectorStore({"b": [0], "c": [1], "a": [1]})
        assert list(store) == ["a", "b", "c"]
        assert store.codes == ("a", "b", "c")

    def test_vectors_are_read_only(self):
        store = VectorStore({"x": [1, 0]})
        with pytest.raises(ValueError):
            store.vector("x")[0] = 0

    def test_source_mapping_is_copied(self):
        source = {"x": [1, 0]}
        store = VectorStore(source)
        source["x"][0] = 0
        source["y"] = [1, 1]
        assert list(store.vector("x")) == [1, 0]
        assert "y" not in store

    def test_stats(self):
        store = VectorStore({"x": [1, 0], "y": [0, 0]}, name="traditions")
        stats = store.stats()
        assert stats["name"] == "traditions"
        assert stats["count"] == 2
        assert stats["dimensions"] == [2]
        assert store.dimensions() == {2: 2}
        assert isinstance(store.vector("x"), np.ndarray)
