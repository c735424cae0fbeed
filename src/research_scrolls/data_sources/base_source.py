"""
The capability every paper source implements, plus the two shared variants.

  PaperSource     : fetch(query, subject, limit) -> list[Paper]
  LiveSource      : HTTP source: response cache in front, synthetic fallback behind
  SyntheticSource : source without a live API; always synthetic
"""

import logging
from abc import ABC, abstractmethod

from research_scrolls.constants import MAX_SYNTHETIC_PER_SOURCE
from research_scrolls.data_sources.base_client import BaseClient, ClientConfig
from research_scrolls.helpers.paper_helpers import compose_query
from research_scrolls.models.model_paper import Paper, SourceId
from research_scrolls.services.synthetic import SyntheticPaperGenerator
from research_scrolls.utils.cache import ResponseCache

logger = logging.getLogger("research_scrolls.data_sources")


class PaperSource(ABC):
    """One provider of normalized paper records."""

    source_id: SourceId

    def __init__(self, generator: SyntheticPaperGenerator) -> None:
        self.generator = generator

    @abstractmethod
    async def fetch(
        self,
        query: str,
        subject: str | None = None,
        limit: int = MAX_SYNTHETIC_PER_SOURCE,
    ) -> list[Paper]:
        """Return up to `limit` papers for the query; must not raise."""
        ...

    async def close(self) -> None:
        return None


class SyntheticSource(PaperSource):
    """A source with no live adapter. Every fetch is served by the generator."""

    def __init__(self, source_id: SourceId, generator: SyntheticPaperGenerator) -> None:
        super().__init__(generator)
        self.source_id = source_id

    async def fetch(
        self,
        query: str,
        subject: str | None = None,
        limit: int = MAX_SYNTHETIC_PER_SOURCE,
    ) -> list[Paper]:
        return self.generator.generate_for_source(self.source_id, query, subject, limit)


class LiveSource(BaseClient, PaperSource):
    """
    Base for sources backed by an HTTP API.

    Subclasses implement `_fetch_live`. `fetch` routes it through the shared
    response cache and replaces any failure with synthetic records tagged
    with this source, so nothing raised upstream escapes.
    """

    def __init__(
        self,
        cache: ResponseCache,
        generator: SyntheticPaperGenerator,
        config: ClientConfig | None = None,
    ) -> None:
        BaseClient.__init__(self, config)
        PaperSource.__init__(self, generator)
        self.cache = cache

    @property
    def _source_name(self) -> str:
        return str(self.source_id)

    def cache_key(self, effective_query: str, limit: int) -> str:
        return f"{self.source_id}:{effective_query}:{limit}"

    async def fetch(
        self,
        query: str,
        subject: str | None = None,
        limit: int = MAX_SYNTHETIC_PER_SOURCE,
    ) -> list[Paper]:
        effective_query = compose_query(query, subject)
        try:
            return await self.cache.get_or_fetch(
                self.cache_key(effective_query, limit),
                lambda: self._fetch_live(effective_query, limit),
                effective_query,
            )
        except Exception as e:
            logger.warning(
                "Falling back to synthetic data for %s (query=%r): %s",
                self.source_id,
                effective_query,
                e,
            )
            return self.generator.generate_for_source(
                self.source_id, query, subject, limit, backfill=True
            )

    @abstractmethod
    async def _fetch_live(self, query: str, limit: int) -> list[Paper]:
        """Query the upstream API with the effective query; may raise."""
        ...
