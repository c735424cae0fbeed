"""
Source registry.

SOURCES is the fixed list of providers shown to callers. `build_sources`
instantiates one PaperSource per id; adding a source means adding its class
and one entry in `_LIVE_SOURCES` or `_SYNTHETIC_SOURCES`.
"""

from collections.abc import Iterable

from research_scrolls.data_sources.arxiv import ArxivClient
from research_scrolls.data_sources.base_client import ClientConfig
from research_scrolls.data_sources.base_source import (
    LiveSource,
    PaperSource,
    SyntheticSource,
)
from research_scrolls.data_sources.biorxiv import BiorxivClient
from research_scrolls.data_sources.local import LocalCorpusSource
from research_scrolls.data_sources.pubmed import PubMedClient
from research_scrolls.data_sources.semantic_scholar import SemanticScholarClient
from research_scrolls.models.model_paper import SourceDescriptor, SourceId
from research_scrolls.services.synthetic import SyntheticPaperGenerator
from research_scrolls.utils.cache import ResponseCache

SOURCES: tuple[SourceDescriptor, ...] = (
    SourceDescriptor(id=SourceId.LOCAL, name="Local Database"),
    SourceDescriptor(id=SourceId.ARXIV, name="arXiv"),
    SourceDescriptor(id=SourceId.PUBMED, name="PubMed"),
    SourceDescriptor(id=SourceId.SEMANTIC_SCHOLAR, name="Semantic Scholar"),
    SourceDescriptor(id=SourceId.IEEE, name="IEEE Xplore"),
    SourceDescriptor(id=SourceId.SPRINGER, name="Springer"),
    SourceDescriptor(id=SourceId.SCIENCEDIRECT, name="ScienceDirect"),
    SourceDescriptor(id=SourceId.NATURE, name="Nature"),
    SourceDescriptor(id=SourceId.SCIENCE, name="Science"),
    SourceDescriptor(id=SourceId.BIORXIV, name="bioRxiv"),
)

_LIVE_SOURCES: dict[SourceId, type[LiveSource]] = {
    SourceId.ARXIV: ArxivClient,
    SourceId.PUBMED: PubMedClient,
    SourceId.SEMANTIC_SCHOLAR: SemanticScholarClient,
    SourceId.BIORXIV: BiorxivClient,
}

_SYNTHETIC_SOURCES: frozenset[SourceId] = frozenset(
    {
        SourceId.IEEE,
        SourceId.SPRINGER,
        SourceId.SCIENCEDIRECT,
        SourceId.NATURE,
        SourceId.SCIENCE,
    }
)


def source_class_for(source_id: str) -> type[PaperSource]:
    """Return the PaperSource class serving `source_id`.

    Raises KeyError for ids outside the registry.
    """
    try:
        sid = SourceId(source_id)
    except ValueError:
        raise KeyError(source_id) from None
    if sid == SourceId.LOCAL:
        return LocalCorpusSource
    if sid in _LIVE_SOURCES:
        return _LIVE_SOURCES[sid]
    if sid in _SYNTHETIC_SOURCES:
        return SyntheticSource
    raise KeyError(source_id)


def build_source(
    source_id: str,
    cache: ResponseCache,
    generator: SyntheticPaperGenerator,
    config: ClientConfig | None = None,
    *,
    biorxiv_interval: str | None = None,
) -> PaperSource:
    """Instantiate the source registered under `source_id`.

    `biorxiv_interval` overrides the configured bioRxiv lookback; it is
    ignored for every other source.
    """
    source_class = source_class_for(source_id)
    if source_class is BiorxivClient:
        return BiorxivClient(cache, generator, config, interval=biorxiv_interval)
    if issubclass(source_class, LiveSource):
        return source_class(cache, generator, config)
    if source_class is SyntheticSource:
        return SyntheticSource(SourceId(source_id), generator)
    return LocalCorpusSource(generator)


def build_sources(
    cache: ResponseCache,
    generator: SyntheticPaperGenerator,
    config: ClientConfig | None = None,
    source_ids: Iterable[str] | None = None,
    *,
    biorxiv_interval: str | None = None,
) -> list[PaperSource]:
    """Instantiate every registered source, in SOURCES order."""
    ids = [d.id for d in SOURCES] if source_ids is None else list(source_ids)
    return [
        build_source(sid, cache, generator, config, biorxiv_interval=biorxiv_interval)
        for sid in ids
    ]
