"""
NCBI E-utilities client used behind the literature proxy.

Two methods:
  1. esearch: Search PubMed and return the JSON response verbatim
  2. efetch: Fetch records for a batch of PMIDs as raw XML
"""

from __future__ import annotations

import logging
from typing import Any

from naijamed_atlas.config import get_settings
from naijamed_atlas.constants import (
    PUBMED_FETCH_URL,
    PUBMED_SEARCH_RETMAX,
    PUBMED_SEARCH_SORT,
    PUBMED_SEARCH_URL,
)
from naijamed_atlas.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    RequestContext,
)

logger = logging.getLogger("naijamed_atlas.data_sources.eutils")


class EUtilsClient(BaseClient):
    """Client for the NCBI esearch/efetch endpoints."""

    def __init__(
        self, api_key: str | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__(config)
        self._api_key = api_key if api_key is not None else get_settings().ncbi_api_key

    @property
    def _source_name(self) -> str:
        return "eutils"

    async def esearch(self, term: str) -> dict[str, Any]:
        """Search PubMed; the response shape is ``{"esearchresult": {"idlist": [...]}}``."""
        params = self._with_api_key(
            {
                "db": "pubmed",
                "term": term,
                "retmode": "json",
                "retmax": PUBMED_SEARCH_RETMAX,
                "sort": PUBMED_SEARCH_SORT,
            }
        )
        data = await self._rest_get(
            PUBMED_SEARCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="esearch"),
        )
        if isinstance(data, dict) and isinstance(data.get("esearchresult"), dict):
            logger.info(
                "esearch found %d IDs", len(data["esearchresult"].get("idlist") or [])
            )
        else:
            logger.warning("Unexpected esearch response shape: %.200r", data)
        return data

    async def efetch(self, ids: list[str]) -> str:
        """Fetch PubMed records for the given PMIDs as raw XML."""
        params = self._with_api_key(
            {"db": "pubmed", "id": ",".join(ids), "retmode": "xml"}
        )
        xml_text = await self._rest_get_xml(
            PUBMED_FETCH_URL,
            params,
            headers={"Accept": "text/xml"},
            context=RequestContext(source=self._source_name, method="efetch"),
        )
        logger.info("efetch returned %d characters for %d IDs", len(xml_text), len(ids))
        return xml_text

    def _with_api_key(self, params: dict[str, Any]) -> dict[str, Any]:
        if self._api_key:
            return {**params, "api_key": self._api_key}
        return params
