"""Pytest configuration and fixtures."""

import pytest

from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.models.herbal import HerbalExcerpt, HerbalSource
from naijamed_atlas.services.llm import CompletionProvider


class FakeProvider(CompletionProvider):
    """Completion provider that replays canned responses and records prompts."""

    name = "fake"

    def __init__(self, responses=None, error: Exception | None = None):
        super().__init__(model="fake-model")
        self.responses = list(responses or [])
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, prompt, system="", *, temperature, max_tokens):
        self.calls.append(
            {
                "prompt": prompt,
                "system": system,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""


@pytest.fixture
def provider_factory() -> type[FakeProvider]:
    return FakeProvider


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(responses=["## Summary: canned answer"])


@pytest.fixture
def sample_articles() -> list[ArticleRecord]:
    """Two articles; only the first names a plant (Vernonia amygdalina)."""
    return [
        ArticleRecord(
            pmid="30000001",
            title="Vernonia amygdalina leaf extract reduces parasitaemia",
            abstract="In vivo studies on mice showed reduced parasitaemia.",
            authors=["Adebayo J", "Okafor C"],
            journal="J Ethnopharmacol",
            pub_date="Mar 2020",
        ),
        ArticleRecord(
            pmid="30000002",
            title="survey of herbal remedies sold in markets of southwest Nigeria",
            abstract="**METHODS**: structured interviews with 120 herb sellers.",
            authors=["Bello A"],
            journal="Afr J Tradit Complement Altern Med",
            pub_date="2019",
        ),
    ]


@pytest.fixture
def sample_excerpt() -> HerbalExcerpt:
    return HerbalExcerpt(
        id="WAP_001",
        text="Khaya senegalensis bark decoction for malaria.",
        source=HerbalSource.WAP,
        page=78,
        embedding=(0.3,) * 384,
    )
