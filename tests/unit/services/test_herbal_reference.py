"""Unit tests for the static herbal reference lookup."""

import math

import pytest

from naijamed_atlas.constants import EMBEDDING_DIM
from naijamed_atlas.models.herbal import HerbalSource
from naijamed_atlas.services.herbal_reference import (
    PHARMACOPOEIA_EXCERPTS,
    HerbalReference,
    cosine_similarity,
    mock_embedding,
)


class TestCosineSimilarity:
    def test_identical_embeddings_score_one(self):
        vector = mock_embedding("vernonia amygdalina for malaria")
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_zero_vector_scores_zero(self):
        assert cosine_similarity([0.0, 0.0, 0.0], [0.3, 0.1, 0.2]) == 0.0
        assert cosine_similarity([0.3, 0.1, 0.2], [0.0, 0.0, 0.0]) == 0.0

    def test_orthogonal_vectors_score_zero(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="same length"):
            cosine_similarity([1.0, 0.0], [1.0])


class TestMockEmbedding:
    def test_unit_length_and_dimension(self):
        vector = mock_embedding("Bitter Leaf")

        assert len(vector) == EMBEDDING_DIM
        assert math.sqrt(sum(v * v for v in vector)) == pytest.approx(1.0)

    def test_deterministic_and_case_insensitive(self):
        assert mock_embedding("Moringa") == mock_embedding("moringa")

    def test_empty_text_is_zero_vector(self):
        assert mock_embedding("") == [0.0] * EMBEDDING_DIM

    def test_bytes_fold_into_slots(self):
        vector = mock_embedding("ab", dim=4)
        a, b = 97 / 255.0, 98 / 255.0
        norm = math.sqrt(a * a + b * b)

        assert vector == pytest.approx([a / norm, b / norm, 0.0, 0.0])


class TestHerbalReference:
    def test_default_table_has_four_unique_entries(self):
        reference = HerbalReference()

        assert len(reference) == 4
        assert len({excerpt.id for excerpt in reference.excerpts}) == 4
        assert {excerpt.source for excerpt in reference.excerpts} == {
            HerbalSource.AHP,
            HerbalSource.WAP,
        }

    def test_retrieve_respects_top_k(self):
        reference = HerbalReference()

        assert len(reference.retrieve("malaria fever", top_k=2)) == 2
        assert len(reference.retrieve("malaria fever")) == 4

    def test_retrieve_with_non_positive_top_k_is_empty(self):
        reference = HerbalReference()

        assert reference.retrieve("malaria fever", top_k=0) == []
        assert reference.retrieve("malaria fever", top_k=-1) == []

    def test_retrieve_returns_table_entries(self):
        results = HerbalReference().retrieve("bitter leaf")

        assert set(results) <= set(PHARMACOPOEIA_EXCERPTS)

    def test_empty_table_returns_empty_list_with_warning(self, caplog):
        reference = HerbalReference(excerpts=[])

        assert reference.retrieve("moringa") == []
        assert "No herbal excerpts loaded" in caplog.text
