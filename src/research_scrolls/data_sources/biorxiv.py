"""
bioRxiv API client.

The details endpoint lists recent preprints for an interval but has no text
search, so the returned collection is filtered locally against the query.
"""

from __future__ import annotations

from typing import Any

from research_scrolls.config import get_settings
from research_scrolls.constants import (
    BIORXIV_DETAILS_URL,
    DOI_URL,
    FALLBACK_QUERY,
    NO_ABSTRACT,
    SOURCE_ID_OFFSETS,
    UNTITLED,
)
from research_scrolls.data_sources.base_client import ClientConfig, RequestContext
from research_scrolls.data_sources.base_source import LiveSource
from research_scrolls.helpers.date_helpers import today_iso
from research_scrolls.models.model_paper import Paper, SourceId
from research_scrolls.services.synthetic import SyntheticPaperGenerator
from research_scrolls.utils.cache import ResponseCache


class BiorxivClient(LiveSource):
    """Client for the bioRxiv collection-details endpoint."""

    source_id = SourceId.BIORXIV

    def __init__(
        self,
        cache: ResponseCache,
        generator: SyntheticPaperGenerator,
        config: ClientConfig | None = None,
        interval: str | None = None,
    ) -> None:
        super().__init__(cache, generator, config)
        self.interval = interval if interval is not None else get_settings().biorxiv_interval

    async def _fetch_live(self, query: str, limit: int) -> list[Paper]:
        data = await self._rest_get(
            f"{BIORXIV_DETAILS_URL}/{self.interval}/0",
            context=RequestContext(
                source=self._source_name, method="details", params={"query": query}
            ),
        )
        collection = data.get("collection") if isinstance(data, dict) else None
        if not isinstance(collection, list):
            return []

        matches = [
            raw for raw in collection if isinstance(raw, dict) and self._matches(raw, query)
        ]
        return [
            self._parse_preprint(raw, index) for index, raw in enumerate(matches[:limit])
        ]

    @staticmethod
    def _matches(raw: dict[str, Any], query: str) -> bool:
        """True if every query term appears in the title, abstract, authors or category."""
        if query == FALLBACK_QUERY:
            return True
        haystack = " ".join(
            str(raw.get(field) or "")
            for field in ("title", "abstract", "authors", "category")
        ).lower()
        return all(term in haystack for term in query.lower().split())

    @staticmethod
    def _parse_preprint(raw: dict[str, Any], index: int) -> Paper:
        """Parse a single collection entry into a Paper."""
        doi = raw.get("doi")
        return Paper(
            id=SOURCE_ID_OFFSETS["biorxiv"] + index,
            title=raw.get("title") or UNTITLED,
            abstract=raw.get("abstract") or NO_ABSTRACT,
            authors=raw.get("authors") or "",
            url=f"{DOI_URL}/{doi}" if doi else "",
            published_date=raw.get("date") or today_iso(),
            journal="bioRxiv",
            source=SourceId.BIORXIV,
        )
