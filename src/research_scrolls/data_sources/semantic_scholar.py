"""Semantic Scholar graph API client: one paper/search call returning JSON."""

from __future__ import annotations

from datetime import date
from typing import Any

from research_scrolls.constants import (
    NO_ABSTRACT,
    SEMANTIC_SCHOLAR_DEFAULT_VENUE,
    SEMANTIC_SCHOLAR_FIELDS,
    SEMANTIC_SCHOLAR_PAPER_URL,
    SEMANTIC_SCHOLAR_SEARCH_URL,
    SOURCE_ID_OFFSETS,
    UNTITLED,
)
from research_scrolls.data_sources.base_client import RequestContext
from research_scrolls.data_sources.base_source import LiveSource
from research_scrolls.models.model_paper import Paper, SourceId


class SemanticScholarClient(LiveSource):
    """Client for the Semantic Scholar paper search endpoint."""

    source_id = SourceId.SEMANTIC_SCHOLAR

    async def _fetch_live(self, query: str, limit: int) -> list[Paper]:
        params = {"query": query, "limit": limit, "fields": SEMANTIC_SCHOLAR_FIELDS}
        data = await self._rest_get(
            SEMANTIC_SCHOLAR_SEARCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="search"),
        )
        items = data.get("data") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [self._parse_paper(item, index) for index, item in enumerate(items)]

    @staticmethod
    def _parse_paper(raw: dict[str, Any], index: int) -> Paper:
        """Parse a single search hit into a Paper."""
        authors = ", ".join(
            a["name"] for a in raw.get("authors") or [] if a.get("name")
        )

        # Only the year is guaranteed; publicationDate is often null.
        published_date = raw.get("publicationDate") or (
            f"{raw.get('year') or date.today().year}-01-01"
        )

        open_access = raw.get("openAccessPdf") or {}
        url = (
            open_access.get("url")
            or raw.get("url")
            or f"{SEMANTIC_SCHOLAR_PAPER_URL}/{raw.get('paperId', '')}"
        )

        return Paper(
            id=SOURCE_ID_OFFSETS["semanticscholar"] + index,
            title=raw.get("title") or UNTITLED,
            abstract=raw.get("abstract") or NO_ABSTRACT,
            authors=authors,
            url=url,
            published_date=published_date,
            journal=raw.get("venue") or SEMANTIC_SCHOLAR_DEFAULT_VENUE,
            source=SourceId.SEMANTIC_SCHOLAR,
        )
