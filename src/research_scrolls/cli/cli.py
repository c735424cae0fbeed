"""Command-line interface for ResearchScrolls."""

import asyncio
import json
from pathlib import Path

import click

from research_scrolls.config import configure_logging, get_settings
from research_scrolls.constants import SUBJECTS
from research_scrolls.data_sources.registry import SOURCES
from research_scrolls.models.model_paper import Paper
from research_scrolls.services.aggregator import PaperAggregator


async def _run_search(
    query: str, subject: str | None, limit: int, sources: tuple[str, ...]
) -> list[Paper]:
    async with PaperAggregator() as aggregator:
        return await aggregator.search(query, subject, limit, sources=sources or None)


@click.group()
@click.version_option(package_name="research-scrolls")
@click.option("--log-level", default=None, help="Override the configured log level")
def main(log_level: str | None):
    """ResearchScrolls: browse papers from many sources at once."""
    configure_logging(log_level)


@main.command()
@click.argument("query", default="")
@click.option("-s", "--subject", type=click.Choice(SUBJECTS), help="Subject filter")
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=lambda: get_settings().default_limit,
    show_default="from settings",
    help="Maximum number of papers to return",
)
@click.option(
    "--source",
    "sources",
    multiple=True,
    type=click.Choice([d.id for d in SOURCES]),
    help="Only query this source (repeatable)",
)
@click.option("-o", "--output", type=click.Path(), help="Output file path (JSON)")
def search(
    query: str,
    subject: str | None,
    limit: int,
    sources: tuple[str, ...],
    output: str | None,
):
    """Search every source for QUERY and print the merged results."""
    papers = asyncio.run(_run_search(query, subject, limit, sources))

    click.echo(f"{len(papers)} papers for: {query or '(any)'}")
    for paper in papers:
        click.echo(f"  [{paper.source}] {paper.published_date}  {paper.title}")

    if output:
        Path(output).write_text(
            json.dumps([p.model_dump(by_alias=True) for p in papers], indent=2)
        )
        click.echo(f"\nResults saved to: {output}")


@main.command()
def sources():
    """List the registered paper sources."""
    for descriptor in SOURCES:
        click.echo(f"{descriptor.id:<16} {descriptor.name}")


if __name__ == "__main__":
    main()
