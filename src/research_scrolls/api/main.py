"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Query, Request

from research_scrolls import __version__
from research_scrolls.config import configure_logging
from research_scrolls.constants import DEFAULT_LIMIT, SUBJECTS
from research_scrolls.data_sources.registry import SOURCES
from research_scrolls.services.aggregator import PaperAggregator


@asynccontextmanager
async def lifespan(app: FastAPI):
    """One aggregator (and so one response cache) for the app's lifetime."""
    configure_logging()
    async with PaperAggregator() as aggregator:
        app.state.aggregator = aggregator
        yield


app = FastAPI(
    title="ResearchScrolls API",
    description="API for searching papers across many research databases",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/sources")
async def list_sources() -> dict[str, Any]:
    """Registered sources and the subject list."""
    return {
        "sources": [d.model_dump() for d in SOURCES],
        "subjects": list(SUBJECTS),
    }


@app.get("/papers")
async def get_papers(
    request: Request,
    query: str = "",
    subject: str | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=1000),
    source: list[str] | None = Query(None),
) -> list[dict[str, Any]]:
    """Search all (or the selected) sources and return shuffled papers."""
    aggregator: PaperAggregator = request.app.state.aggregator
    papers = await aggregator.search(query, subject, limit, sources=source)
    return [p.model_dump(by_alias=True) for p in papers]
