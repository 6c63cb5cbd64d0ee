"""One user's research session: plan -> fetch -> synthesize, as a conversation."""

import logging

from naijamed_atlas.constants import SESSION_ERROR_RESPONSE
from naijamed_atlas.data_sources.pubmed import PubMedClient
from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.models.conversation import AppMode, ConversationTurn, Role
from naijamed_atlas.services.query_planner import search_pubmed_ids
from naijamed_atlas.services.synthesis import Synthesizer

logger = logging.getLogger(__name__)


class ResearchSession:
    """Holds the view state, conversation and articles of one search session.

    Each run() replaces the previous conversation and article set.
    """

    def __init__(self, client: PubMedClient, synthesizer: Synthesizer) -> None:
        self.client = client
        self.synthesizer = synthesizer
        self.mode = AppMode.LANDING
        self.query = ""
        self.loading_step = ""
        self.turns: list[ConversationTurn] = []
        self.articles: dict[str, ArticleRecord] = {}

    def _set_step(self, message: str) -> None:
        logger.info(message)
        self.loading_step = message

    def _fail(self, text: str) -> list[ConversationTurn]:
        self.turns = [ConversationTurn(role=Role.ASSISTANT, text=text, is_error=True)]
        return self.turns

    async def run(
        self, query: str, skip_name_lookup: bool = False
    ) -> list[ConversationTurn]:
        """Run the full pipeline for a query and return the resulting turns."""
        if not query.strip():
            return self.turns

        self.query = query
        self.mode = AppMode.SEARCHING
        self.articles = {}
        self.turns = []
        self._set_step("Accessing PubMed Database...")

        try:
            pmids = await search_pubmed_ids(query, self.client, self._set_step)
            if not pmids:
                self._set_step("No relevant papers found in initial search.")
                return self._fail(
                    f'I couldn\'t find specific research papers matching "{query}" '
                    "even after checking National and Regional West African "
                    "databases.\n\nTry using the scientific name if known, or broader "
                    'terms like "Medicinal Plants Nigeria".'
                )

            self._set_step(
                f"Found {len(pmids)} relevant papers. Retrieving abstracts..."
            )
            articles = await self.client.fetch_articles(pmids)
            if not articles:
                return self._fail(
                    f"Found {len(pmids)} paper IDs but couldn't retrieve article "
                    "details. This may be due to network restrictions or API limits."
                )

            self.articles = {article.pmid: article for article in articles}

            self._set_step("Synthesizing research...")
            answer = await self.synthesizer.generate(
                query, articles, skip_name_lookup=skip_name_lookup
            )
            self.turns = [
                ConversationTurn(role=Role.USER, text=query),
                ConversationTurn(role=Role.ASSISTANT, text=answer),
            ]
            return self.turns

        except Exception:
            logger.exception("Error during search process for %r", query)
            return self._fail(SESSION_ERROR_RESPONSE)

        finally:
            self.mode = AppMode.RESULTS

    def reset(self) -> None:
        """Return to the landing view and forget the previous search."""
        self.mode = AppMode.LANDING
        self.query = ""
        self.loading_step = ""
        self.turns = []
        self.articles = {}
