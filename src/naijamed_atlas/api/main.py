"""FastAPI application: PubMed relay endpoints and the research pipeline.

The relay exists because the E-utilities API does not send permissive CORS
headers; responses are passed through without transformation.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from naijamed_atlas import __version__
from naijamed_atlas.config import get_settings
from naijamed_atlas.data_sources.eutils import EUtilsClient
from naijamed_atlas.data_sources.pubmed import PubMedClient
from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.models.conversation import AppMode, ConversationTurn
from naijamed_atlas.services.herbal_reference import HerbalReference
from naijamed_atlas.services.llm import get_provider
from naijamed_atlas.services.research import ResearchSession
from naijamed_atlas.services.synthesis import Synthesizer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.eutils = EUtilsClient()
    app.state.pubmed = PubMedClient(settings.proxy_base_url)
    app.state.synthesizer = Synthesizer(get_provider(settings), HerbalReference())
    try:
        yield
    finally:
        await app.state.eutils.close()
        await app.state.pubmed.close()


app = FastAPI(
    title="NaijaMed Atlas API",
    description="PubMed relay and research synthesis for Nigerian traditional medicine",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -- Dependencies -------------------------------------------------------------


def get_eutils_client(request: Request) -> EUtilsClient:
    return request.app.state.eutils


def get_research_session(request: Request) -> ResearchSession:
    return ResearchSession(request.app.state.pubmed, request.app.state.synthesizer)


# -- Schemas ------------------------------------------------------------------


class ResearchRequest(BaseModel):
    query: str
    skip_name_lookup: bool = False


class ResearchResponse(BaseModel):
    query: str
    mode: AppMode
    turns: list[ConversationTurn]
    articles: list[ArticleRecord]


# -- Routes -------------------------------------------------------------------


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/api/pubmed/search")
async def pubmed_search(
    term: str | None = Query(default=None),
    client: EUtilsClient = Depends(get_eutils_client),
):
    """Relay a search term to esearch and return its JSON verbatim."""
    if not term:
        return JSONResponse({"error": "Term parameter is required"}, status_code=400)

    logger.info("Received search term: %s", term)
    try:
        data = await client.esearch(term)
    except Exception as e:
        logger.exception("PubMed search error for term %r", term)
        return JSONResponse(
            {"error": "Failed to search PubMed", "details": str(e)}, status_code=500
        )
    return JSONResponse(data)


@app.get("/api/pubmed/fetch")
async def pubmed_fetch(
    ids: list[str] | None = Query(default=None),
    client: EUtilsClient = Depends(get_eutils_client),
):
    """Relay a comma-joined PMID batch to efetch and stream back the XML.

    Repeated ``ids`` parameters are joined with commas.
    """
    joined_ids = ",".join(ids or [])
    if not joined_ids:
        return JSONResponse({"error": "IDs parameter is required"}, status_code=400)

    try:
        xml_text = await client.efetch(joined_ids.split(","))
    except Exception as e:
        logger.exception("PubMed fetch error for ids %s", joined_ids)
        return JSONResponse(
            {"error": "Failed to fetch PubMed data", "details": str(e)},
            status_code=500,
        )
    return Response(content=xml_text, media_type="text/xml")


@app.post("/api/research", response_model=ResearchResponse)
async def research(
    body: ResearchRequest,
    session: ResearchSession = Depends(get_research_session),
) -> ResearchResponse:
    """Run the full search -> fetch -> synthesize pipeline for one query."""
    await session.run(body.query, skip_name_lookup=body.skip_name_lookup)
    return ResearchResponse(
        query=session.query,
        mode=session.mode,
        turns=session.turns,
        articles=list(session.articles.values()),
    )
