"""Unit tests for the source registry."""

import pytest

from research_scrolls.data_sources.arxiv import ArxivClient
from research_scrolls.data_sources.base_source import SyntheticSource
from research_scrolls.data_sources.biorxiv import BiorxivClient
from research_scrolls.data_sources.local import LocalCorpusSource
from research_scrolls.data_sources.pubmed import PubMedClient
from research_scrolls.data_sources.registry import (
    SOURCES,
    build_source,
    build_sources,
    source_class_for,
)
from research_scrolls.data_sources.semantic_scholar import SemanticScholarClient


def test_sources_has_ten_unique_entries():
    ids = [d.id for d in SOURCES]
    assert len(ids) == 10
    assert len(set(ids)) == 10
    assert ids[0] == "local"


@pytest.mark.parametrize(
    "source_id, expected",
    [
        ("local", LocalCorpusSource),
        ("arxiv", ArxivClient),
        ("pubmed", PubMedClient),
        ("semanticscholar", SemanticScholarClient),
        ("biorxiv", BiorxivClient),
        ("ieee", SyntheticSource),
        ("science", SyntheticSource),
    ],
)
def test_source_class_for(source_id, expected):
    assert source_class_for(source_id) is expected


def test_unknown_source_raises_key_error():
    with pytest.raises(KeyError):
        source_class_for("myspace")


def test_build_synthetic_source_keeps_its_id(cache, generator):
    source = build_source("springer", cache, generator)
    assert isinstance(source, SyntheticSource)
    assert source.source_id == "springer"


@pytest.mark.asyncio
async def test_build_sources_shares_cache_and_generator(cache, generator):
    sources = build_sources(cache, generator)

    assert [s.source_id for s in sources] == [d.id for d in SOURCES]
    assert all(s.generator is generator for s in sources)
    assert all(s.cache is cache for s in sources if hasattr(s, "cache"))
    for s in sources:
        await s.close()


def test_build_sources_subset(cache, generator):
    sources = build_sources(cache, generator, source_ids=["nature", "arxiv"])
    assert [s.source_id for s in sources] == ["nature", "arxiv"]


def test_build_source_passes_biorxiv_interval(cache, generator):
    source = build_source("biorxiv", cache, generator, biorxiv_interval="14d")
    assert isinstance(source, BiorxivClient)
    assert source.interval == "14d"


def test_build_source_biorxiv_interval_defaults_to_settings(cache, generator):
    assert build_source("biorxiv", cache, generator).interval == "30d"
