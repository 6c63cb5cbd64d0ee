"""
PubMed client that talks to the literature proxy.

Two methods:
  1. search: Find PMIDs for a search term (empty list on any failure)
  2. fetch_articles: Fetch and parse article records for given PMIDs
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from naijamed_atlas.config import get_settings
from naijamed_atlas.constants import MAX_AUTHORS, NO_ABSTRACT, NO_TITLE, UNKNOWN_JOURNAL
from naijamed_atlas.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    DataSourceError,
    RequestContext,
)
from naijamed_atlas.models.article import ArticleRecord

logger = logging.getLogger("naijamed_atlas.data_sources.pubmed")


class PubMedClient(BaseClient):
    """Client for the same-origin PubMed search/fetch proxy."""

    def __init__(
        self, base_url: str | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__(config)
        self.base_url = (base_url or get_settings().proxy_base_url).rstrip("/")

    @property
    def _source_name(self) -> str:
        return "pubmed"

    async def search(self, term: str) -> list[str]:
        """Search PubMed through the proxy and return the list of PMIDs.

        Failed requests and unexpected response shapes count as zero results.
        """
        try:
            data = await self._rest_get(
                f"{self.base_url}/pubmed/search",
                {"term": term},
                context=RequestContext(source=self._source_name, method="search"),
            )
        except DataSourceError as e:
            logger.error("PubMed search failed for term %r: %s", term, e)
            return []

        result = data.get("esearchresult") if isinstance(data, dict) else None
        if not isinstance(result, dict):
            logger.error("Invalid response format from PubMed proxy: %.200r", data)
            return []

        pmids: list[str] = result.get("idlist") or []
        logger.info("Found %d IDs for term: %s", len(pmids), term)
        return pmids

    async def fetch_articles(self, pmids: list[str]) -> list[ArticleRecord]:
        """Fetch article records for the given PMIDs through the proxy."""
        if not pmids:
            logger.debug("No PMIDs provided to fetch_articles")
            return []

        try:
            xml_text = await self._rest_get_xml(
                f"{self.base_url}/pubmed/fetch",
                {"ids": ",".join(pmids)},
                context=RequestContext(source=self._source_name, method="fetch"),
            )
        except DataSourceError as e:
            logger.error("PubMed fetch failed for %d PMIDs: %s", len(pmids), e)
            return []

        if not xml_text:
            logger.error("Empty response from PubMed fetch proxy")
            return []

        return parse_pubmed_xml(xml_text)


def parse_pubmed_xml(xml_text: str) -> list[ArticleRecord]:
    """Parse efetch XML into ArticleRecord objects.

    Malformed XML is logged and yields an empty list.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        logger.error("XML parsing error: %s; raw response: %.500s", e, xml_text)
        return []

    article_elems = root.iter("PubmedArticle")
    articles = [_parse_article(elem) for elem in article_elems]
    logger.info("Parsed %d articles", len(articles))
    return articles


def _parse_article(article_elem: ET.Element) -> ArticleRecord:
    pmid = _xml_text(article_elem, ".//PMID") or ""
    title = _xml_text(article_elem, ".//ArticleTitle") or NO_TITLE

    # Abstract - may have multiple labelled sections
    abstract = ""
    for abs_elem in article_elem.iter("AbstractText"):
        label = abs_elem.get("Label")
        prefix = f"**{label}**: " if label else ""
        abstract += prefix + "".join(abs_elem.itertext()) + " "
    abstract = abstract.strip() or NO_ABSTRACT

    authors = []
    for author in article_elem.iter("Author"):
        last_name = _xml_text(author, "LastName")
        initials = _xml_text(author, "Initials") or ""
        if last_name:
            authors.append(f"{last_name} {initials}".strip())

    journal = _xml_text(article_elem, ".//Title") or UNKNOWN_JOURNAL

    year = _xml_text(article_elem, ".//PubDate/Year") or ""
    month = _xml_text(article_elem, ".//PubDate/Month") or ""

    return ArticleRecord(
        pmid=pmid,
        title=title,
        abstract=abstract,
        authors=authors[:MAX_AUTHORS],
        journal=journal,
        pub_date=f"{month} {year}".strip(),
    )


def _xml_text(elem: ET.Element, path: str) -> str | None:
    """Return the full text content of the first match, or None."""
    found = elem.find(path)
    if found is None:
        return None
    return "".join(found.itertext()) or None
