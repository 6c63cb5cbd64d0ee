"""
Tiered PubMed query planner.

Turns a conversational question into a PubMed search term and broadens it
until results are found:

  Tier 1 (strict)   core query AND Nigeria AND medical/ethnobotanical context
  Tier 2 (national) core query AND Nigeria
  Tier 3 (regional) core query AND West Africa AND medical/ethnobotanical context

Later tiers only run when every earlier tier returned no PMIDs.
"""

import logging
import re
from collections.abc import Callable
from typing import NamedTuple

from naijamed_atlas.constants import (
    LOCATION_CONTEXT,
    MEDICINE_CONTEXT,
    MIN_KEYWORD_LENGTH,
    PROGRESS_TIER_1,
    PROGRESS_TIER_2,
    PROGRESS_TIER_3,
    REGIONAL_CONTEXT,
    STOP_WORDS,
)
from naijamed_atlas.data_sources.pubmed import PubMedClient

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,?.!]+")


class SearchTier(NamedTuple):
    name: str
    progress: str
    term: str


def clean_query(query: str) -> str:
    """Strip conversational filler to leave the core subject.

    "what is the local name for jute leaf in nigeria" -> "jute leaf"
    """
    words = _TOKEN_SPLIT.split(query.lower())
    return " ".join(
        word
        for word in words
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    )


def build_tiers(core_query: str) -> list[SearchTier]:
    """Return the three search tiers for a core query, strictest first."""
    core = f"({core_query})"
    return [
        SearchTier(
            "strict",
            PROGRESS_TIER_1,
            f"{core} AND {LOCATION_CONTEXT} AND {MEDICINE_CONTEXT}",
        ),
        SearchTier("national", PROGRESS_TIER_2, f"{core} AND {LOCATION_CONTEXT}"),
        SearchTier(
            "regional",
            PROGRESS_TIER_3,
            f"{core} AND {REGIONAL_CONTEXT} AND {MEDICINE_CONTEXT}",
        ),
    ]


async def search_pubmed_ids(
    query: str,
    client: PubMedClient,
    on_progress: Callable[[str], None] | None = None,
) -> list[str]:
    """Search PubMed with the three-tier strategy and return the first non-empty PMID list.

    Args:
        query: Raw user query.
        client: Proxy client; its search() already maps failures to [].
        on_progress: Optional callback receiving a status line before each tier.

    Returns:
        PMIDs from the first tier that found any, or [] when all three are empty.
    """
    core_query = clean_query(query) or query

    pmids: list[str] = []
    for tier in build_tiers(core_query):
        if on_progress:
            on_progress(tier.progress)
        pmids = await client.search(tier.term)
        if pmids:
            logger.info("Tier %s found %d PMIDs", tier.name, len(pmids))
            return pmids
        logger.info("Tier %s empty for core query %r", tier.name, core_query)

    return pmids
