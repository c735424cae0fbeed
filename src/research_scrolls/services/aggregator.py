"""Aggregator: fan a search out to every source, merge, shuffle and truncate."""

import asyncio
import logging
import math
import random
import time
from collections.abc import Iterable, Sequence

from research_scrolls.config import Settings, get_settings
from research_scrolls.data_sources.base_client import ClientConfig, RetryConfig
from research_scrolls.data_sources.base_source import PaperSource
from research_scrolls.data_sources.registry import build_sources
from research_scrolls.models.model_paper import Paper
from research_scrolls.services.synthetic import SyntheticPaperGenerator
from research_scrolls.utils.cache import ResponseCache

logger = logging.getLogger(__name__)


class PaperAggregator:
    """
    Owns the response cache and one instance of every source.

    Use as an async context manager (or call `close()`) so the sources'
    HTTP sessions are released.
    """

    def __init__(
        self,
        sources: Sequence[PaperSource] | None = None,
        *,
        cache: ResponseCache | None = None,
        generator: SyntheticPaperGenerator | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.cache = cache or ResponseCache(
            ttl_seconds=self.settings.cache_ttl_seconds,
            max_entries=self.settings.cache_max_entries,
        )
        self.generator = generator or SyntheticPaperGenerator(
            corpus_size=self.settings.local_corpus_size
        )
        if sources is None:
            sources = build_sources(
                self.cache,
                self.generator,
                self._client_config(),
                biorxiv_interval=self.settings.biorxiv_interval,
            )
        self.sources = list(sources)

    def _client_config(self) -> ClientConfig:
        return ClientConfig(
            retry=RetryConfig(max_retries=self.settings.max_retries),
            timeout_seconds=self.settings.request_timeout_seconds,
            user_agent=self.settings.user_agent,
        )

    async def close(self) -> None:
        await asyncio.gather(*(source.close() for source in self.sources))

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Search ---------------------------------------------------------------

    async def search(
        self,
        query: str = "",
        subject: str | None = None,
        limit: int | None = None,
        sources: Iterable[str] | None = None,
    ) -> list[Paper]:
        """Search every source concurrently and return at most `limit` shuffled papers.

        Args:
            query: Free-text query; may be empty.
            subject: Optional subject filter; "All" means none.
            limit: Maximum number of papers returned. Defaults to settings.default_limit.
            sources: Optional source ids to restrict the fan-out to.

        Returns:
            Papers from all sources in random order. Never raises: a failing
            source contributes nothing.
        """
        limit = self.settings.default_limit if limit is None else limit
        selected = self._select(sources)
        if limit <= 0 or not selected:
            return []

        per_source_limit = math.ceil(limit / len(selected))
        start = time.monotonic()

        batches = await asyncio.gather(
            *(
                self._safe_fetch(source, query, subject, per_source_limit)
                for source in selected
            )
        )

        papers = [paper for batch in batches for paper in batch]
        self.rng.shuffle(papers)

        logger.info(
            "Search query=%r subject=%r per_source=%d counts=%s elapsed=%.2fs",
            query,
            subject,
            per_source_limit,
            {str(s.source_id): len(b) for s, b in zip(selected, batches)},
            time.monotonic() - start,
        )
        return papers[:limit]

    def _select(self, source_ids: Iterable[str] | None) -> list[PaperSource]:
        if source_ids is None:
            return self.sources
        wanted = set(source_ids)
        return [s for s in self.sources if s.source_id in wanted]

    @staticmethod
    async def _safe_fetch(
        source: PaperSource, query: str, subject: str | None, limit: int
    ) -> list[Paper]:
        try:
            return await source.fetch(query, subject, limit)
        except Exception:
            logger.exception("Source %s failed; contributing no results", source.source_id)
            return []


async def search_papers(
    query: str,
    subject: str | None = None,
    limit: int | None = None,
    *,
    aggregator: PaperAggregator | None = None,
) -> list[Paper]:
    """Search all sources. Without an aggregator, a temporary one is used for this call."""
    if aggregator is not None:
        return await aggregator.search(query, subject, limit)
    async with PaperAggregator() as temporary:
        return await temporary.search(query, subject, limit)
