"""Research synthesis: articles + pharmacopoeia + local names -> Markdown answer."""

import logging

from naijamed_atlas.constants import (
    HERBAL_TOP_K,
    MAX_ENRICHED_NAMES,
    SYNTHESIS_EMPTY_RESPONSE,
    SYNTHESIS_ERROR_RESPONSE,
    SYNTHESIS_MAX_TOKENS,
    SYNTHESIS_TEMPERATURE,
)
from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.models.plant_names import LocalPlantNames
from naijamed_atlas.services.herbal_reference import HerbalReference
from naijamed_atlas.services.llm import CompletionError, CompletionProvider
from naijamed_atlas.services.name_enrichment import fetch_all_local_names
from naijamed_atlas.services.plant_names import extract_plant_names
from naijamed_atlas.services.prompt_builder import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)


class Synthesizer:
    """Turns a query and its articles into a citation-annotated summary."""

    def __init__(
        self,
        provider: CompletionProvider,
        herbal_reference: HerbalReference,
        max_enriched_names: int = MAX_ENRICHED_NAMES,
    ) -> None:
        self.provider = provider
        self.herbal_reference = herbal_reference
        self.max_enriched_names = max_enriched_names

    async def lookup_local_names(
        self, plant_names: list[str]
    ) -> dict[str, LocalPlantNames]:
        """Enrich extracted names, skipping the lookup when there are too many."""
        if not plant_names:
            return {}
        if len(plant_names) > self.max_enriched_names:
            logger.info(
                "%d plants detected (limit %d), skipping name lookup",
                len(plant_names),
                self.max_enriched_names,
            )
            return {}
        return await fetch_all_local_names(plant_names, self.provider)

    async def generate(
        self,
        query: str,
        articles: list[ArticleRecord],
        skip_name_lookup: bool = False,
    ) -> str:
        """Build the synthesis prompt and return the model's raw answer.

        Provider failures return a fixed error message instead of raising.
        """
        plant_names = extract_plant_names(articles)
        logger.debug("Extracted plant names: %s", plant_names)

        local_names = {} if skip_name_lookup else await self.lookup_local_names(plant_names)
        excerpts = self.herbal_reference.retrieve(query, top_k=HERBAL_TOP_K)

        system_prompt = build_system_prompt(has_local_names=bool(local_names))
        user_prompt = build_user_prompt(query, articles, excerpts, local_names)

        logger.info(
            "Synthesizing with %d articles, %d excerpts, %d enriched names",
            len(articles),
            len(excerpts),
            len(local_names),
        )
        try:
            response = await self.provider.complete(
                user_prompt,
                system_prompt,
                temperature=SYNTHESIS_TEMPERATURE,
                max_tokens=SYNTHESIS_MAX_TOKENS,
            )
        except CompletionError as e:
            logger.error("Synthesis failed: %s", e)
            return SYNTHESIS_ERROR_RESPONSE

        return response or SYNTHESIS_EMPTY_RESPONSE
