"""Shared fixtures for integration tests."""

import pytest

from research_scrolls.data_sources.arxiv import ArxivClient
from research_scrolls.data_sources.biorxiv import BiorxivClient
from research_scrolls.data_sources.pubmed import PubMedClient
from research_scrolls.data_sources.semantic_scholar import SemanticScholarClient
from research_scrolls.services.aggregator import PaperAggregator
from research_scrolls.services.synthetic import SyntheticPaperGenerator
from research_scrolls.utils.cache import ResponseCache


@pytest.fixture
def live_cache():
    return ResponseCache()


@pytest.fixture
def live_generator():
    return SyntheticPaperGenerator(corpus_size=100)


@pytest.fixture
async def arxiv_client(live_cache, live_generator):
    """Create and tear down an ArxivClient."""
    c = ArxivClient(live_cache, live_generator)
    yield c
    await c.close()


@pytest.fixture
async def pubmed_client(live_cache, live_generator):
    """Create and tear down a PubMedClient."""
    c = PubMedClient(live_cache, live_generator)
    yield c
    await c.close()


@pytest.fixture
async def semantic_scholar_client(live_cache, live_generator):
    """Create and tear down a SemanticScholarClient."""
    c = SemanticScholarClient(live_cache, live_generator)
    yield c
    await c.close()


@pytest.fixture
async def biorxiv_client(live_cache, live_generator):
    """Create and tear down a BiorxivClient."""
    c = BiorxivClient(live_cache, live_generator)
    yield c
    await c.close()


@pytest.fixture
async def aggregator(live_cache, live_generator):
    """A PaperAggregator over every registered source."""
    async with PaperAggregator(cache=live_cache, generator=live_generator) as a:
        yield a
