"""Nigerian local-name lookup for extracted scientific plant names.

One completion request per name. Names are processed in small concurrent
batches with a pause between batches to stay under provider rate limits.
"""

import asyncio
import logging

from naijamed_atlas.constants import (
    NAME_LOOKUP_BATCH_DELAY,
    NAME_LOOKUP_BATCH_SIZE,
    NAME_LOOKUP_MAX_TOKENS,
    NAME_LOOKUP_TEMPERATURE,
)
from naijamed_atlas.models.plant_names import LocalPlantNames
from naijamed_atlas.services.llm import (
    CompletionError,
    CompletionProvider,
    parse_llm_json_object,
)

logger = logging.getLogger(__name__)

NAME_LOOKUP_PROMPT = """You are an expert ethnobotanist specializing in Nigerian traditional medicine.

Search your knowledge for Nigerian traditional names for: "{scientific_name}"

Return ONLY a valid JSON object (no markdown, no backticks, no extra text) with this exact structure:
{{
  "scientificName": "{scientific_name}",
  "commonName": "common English name",
  "yoruba": "Yoruba name or null",
  "igbo": "Igbo name or null",
  "hausa": "Hausa name or null",
  "edo": "Edo name or null",
  "efik": "Efik/Ibibio name or null",
  "pidgin": "Nigerian Pidgin name or null",
  "isNative": true or false,
  "notes": "brief note about plant's presence in Nigeria or null"
}}

Rules:
- Use null (not "null" in quotes) for unknown names
- Be accurate - don't guess names
- isNative means native to Nigeria/West Africa region
- Keep notes brief (under 50 words)"""


async def fetch_local_names(
    scientific_name: str, provider: CompletionProvider
) -> LocalPlantNames:
    """Look up local names for one plant; failures return a placeholder record."""
    prompt = NAME_LOOKUP_PROMPT.format(scientific_name=scientific_name)
    try:
        text = await provider.complete(
            prompt,
            temperature=NAME_LOOKUP_TEMPERATURE,
            max_tokens=NAME_LOOKUP_MAX_TOKENS,
        )
        return LocalPlantNames.model_validate(parse_llm_json_object(text))
    except (CompletionError, ValueError) as e:
        logger.error("Error fetching Nigerian names for %s: %s", scientific_name, e)
        return LocalPlantNames.placeholder(scientific_name)


async def fetch_all_local_names(
    scientific_names: list[str],
    provider: CompletionProvider,
    batch_size: int = NAME_LOOKUP_BATCH_SIZE,
    delay: float = NAME_LOOKUP_BATCH_DELAY,
) -> dict[str, LocalPlantNames]:
    """Look up every name, keyed by the name as extracted, in input order."""
    names_map: dict[str, LocalPlantNames] = {}
    if not scientific_names:
        return names_map

    logger.info("Fetching Nigerian names for %d plants", len(scientific_names))

    for i in range(0, len(scientific_names), batch_size):
        batch = scientific_names[i : i + batch_size]
        results = await asyncio.gather(
            *(fetch_local_names(name, provider) for name in batch)
        )
        names_map.update(zip(batch, results))

        if i + batch_size < len(scientific_names):
            await asyncio.sleep(delay)

    return names_map
