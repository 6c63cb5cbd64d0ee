"""Command-line interface for NaijaMed Atlas."""

import asyncio
import json
import logging

import click

from naijamed_atlas.config import get_settings
from naijamed_atlas.data_sources.pubmed import PubMedClient
from naijamed_atlas.models.conversation import Role
from naijamed_atlas.services.herbal_reference import HerbalReference
from naijamed_atlas.services.llm import get_provider
from naijamed_atlas.services.name_enrichment import fetch_all_local_names
from naijamed_atlas.services.research import ResearchSession
from naijamed_atlas.services.synthesis import Synthesizer


@click.group()
@click.version_option(package_name="naijamed-atlas")
def main():
    """NaijaMed Atlas: research Nigerian traditional medicine in PubMed."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(), format="%(levelname)s %(name)s %(message)s"
    )


@main.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST setting)")
@click.option("--port", default=None, type=int, help="Port (defaults to PORT setting)")
def serve(host: str | None, port: int | None):
    """Run the PubMed relay and research API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "naijamed_atlas.api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


async def _run_search(query: str, skip_names: bool) -> ResearchSession:
    synthesizer = Synthesizer(get_provider(), HerbalReference())
    async with PubMedClient() as client:
        session = ResearchSession(client, synthesizer)
        await session.run(query, skip_name_lookup=skip_names)
    return session


@main.command()
@click.argument("query")
@click.option(
    "--skip-names", is_flag=True, help="Skip the Nigerian local-name lookup step"
)
def search(query: str, skip_names: bool):
    """Search the literature and print a synthesized answer."""
    session = asyncio.run(_run_search(query, skip_names))

    for turn in session.turns:
        if turn.role is Role.USER:
            continue
        click.echo(turn.text, err=turn.is_error)

    if session.articles:
        click.echo(f"\nSources ({len(session.articles)}):")
        for article in session.articles.values():
            click.echo(f"  PMID:{article.pmid}  {article.title} ({article.pub_date})")


@main.command()
@click.argument("scientific_names", nargs=-1, required=True)
def names(scientific_names: tuple[str, ...]):
    """Look up Nigerian local names for scientific plant names."""
    results = asyncio.run(fetch_all_local_names(list(scientific_names), get_provider()))
    click.echo(
        json.dumps([record.model_dump() for record in results.values()], indent=2)
    )


if __name__ == "__main__":
    main()
