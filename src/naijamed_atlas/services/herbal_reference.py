"""Static pharmacopoeia reference lookup.

The table holds four excerpts from the African Herbal Pharmacopoeia (AHP) and
the West African Pharmacopoeia (WAP). Query and excerpt vectors are
placeholders: the query vector is folded from the bytes of the lowercased
text, so ranking is deterministic but carries no semantic meaning. A real
embedding model can replace mock_embedding without changing the interface.

Build one HerbalReference at process start and hand it to its consumers.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from naijamed_atlas.constants import EMBEDDING_DIM, HERBAL_TOP_K
from naijamed_atlas.models.herbal import HerbalExcerpt, HerbalSource

logger = logging.getLogger(__name__)


def _constant_vector(value: float) -> tuple[float, ...]:
    return (value,) * EMBEDDING_DIM


PHARMACOPOEIA_EXCERPTS: tuple[HerbalExcerpt, ...] = (
    HerbalExcerpt(
        id="AHP_001",
        text=(
            "Moringa oleifera (Moringaceae) - commonly known as drumstick tree. "
            "Traditional uses: leaves used for malnutrition, bark for diarrhea, roots "
            "for joint pains. Plant parts used: leaves, bark, roots, seeds. "
            "Preparation: decoction of leaves for nutritional supplement, powder from "
            "dried leaves. Dosage: 1-2 teaspoons of leaf powder daily. Toxicity: high "
            "doses of roots may be toxic. Traditional healers use the leaves for "
            "treating anemia and malnutrition due to high iron and vitamin content."
        ),
        source=HerbalSource.AHP,
        page=24,
        embedding=_constant_vector(0.1),
    ),
    HerbalExcerpt(
        id="AHP_002",
        text=(
            "Vernonia amygdalina (Asteraceae) - commonly known as bitter leaf. "
            "Traditional uses: used for stomach disorders, fever, and as blood tonic. "
            "Plant parts used: leaves, roots. Preparation: leaf extract as bitter "
            "tonic, decoction for stomach ailments. Dosage: 2-3 tablespoons of leaf "
            "extract twice daily. Side effects: excessive consumption may cause "
            "stomach irritation. Widely used in folk medicine for treating malaria, "
            "diabetes, and gastrointestinal disorders."
        ),
        source=HerbalSource.AHP,
        page=45,
        embedding=_constant_vector(0.2),
    ),
    HerbalExcerpt(
        id="WAP_001",
        text=(
            "Khaya senegalensis (Meliaceae) - commonly known as African mahogany or "
            "dry bark. Traditional uses: bark used for malaria, fever, and stomach "
            "problems. Plant parts used: bark, leaves. Preparation: decoction of bark "
            "for malaria treatment. Contraindications: not for pregnant women. Used "
            "by traditional healers for treating fever and as anthelmintic. Bark "
            "contains limonoids responsible for antimalarial activity."
        ),
        source=HerbalSource.WAP,
        page=78,
        embedding=_constant_vector(0.3),
    ),
    HerbalExcerpt(
        id="WAP_002",
        text=(
            "Lannea microcarpa (Anacardiaceae) - commonly known as small-fruited "
            "lannea. Traditional uses: used for dysentery, diarrhea, and as "
            "astringent. Plant parts used: bark, leaves. Preparation: bark decoction "
            "for diarrhea. Traditional healers combine with other plants for treating "
            "stomach disorders. Contains tannins which provide astringent properties "
            "for treating diarrhea."
        ),
        source=HerbalSource.WAP,
        page=102,
        embedding=_constant_vector(0.4),
    ),
)


def mock_embedding(text: str, dim: int = EMBEDDING_DIM) -> list[float]:
    """Fold the UTF-8 bytes of the lowercased text into a unit-length vector.

    Byte i adds byte/255 to slot i % dim, wrapping each slot into [0, 1).
    """
    vector = np.zeros(dim)
    for i, byte in enumerate(text.lower().encode("utf-8")):
        idx = i % dim
        vector[idx] = (vector[idx] + byte / 255.0) % 1
    norm = np.linalg.norm(vector)
    return (vector / (norm or 1)).tolist()


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors; 0.0 when either is all zeros."""
    if len(a) != len(b):
        raise ValueError(f"Embeddings must have the same length ({len(a)} != {len(b)})")
    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    norm_a = np.linalg.norm(a_arr)
    norm_b = np.linalg.norm(b_arr)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a_arr, b_arr) / (norm_a * norm_b))


class HerbalReference:
    """Read-only, in-memory pharmacopoeia table searched by cosine similarity."""

    def __init__(self, excerpts: Iterable[HerbalExcerpt] = PHARMACOPOEIA_EXCERPTS):
        self._excerpts: tuple[HerbalExcerpt, ...] = tuple(excerpts)
        logger.info("Loaded %d herbal excerpts", len(self._excerpts))

    def __len__(self) -> int:
        return len(self._excerpts)

    @property
    def excerpts(self) -> tuple[HerbalExcerpt, ...]:
        return self._excerpts

    def retrieve(self, query: str, top_k: int = HERBAL_TOP_K) -> list[HerbalExcerpt]:
        """Return up to top_k excerpts, most similar first. Ties keep table order."""
        if not self._excerpts:
            logger.warning("No herbal excerpts loaded, returning empty results")
            return []

        query_vector = mock_embedding(query)
        ranked = sorted(
            self._excerpts,
            key=lambda excerpt: cosine_similarity(query_vector, excerpt.embedding),
            reverse=True,
        )
        return ranked[: max(top_k, 0)]
