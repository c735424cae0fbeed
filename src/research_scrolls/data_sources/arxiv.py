"""
arXiv API client.

One GET against the Atom query endpoint; entries are pulled out of the feed
with the tolerant tag scanner rather than a DOM parser.
"""

from __future__ import annotations

import re

from research_scrolls.constants import (
    ARXIV_ABS_URL,
    ARXIV_QUERY_URL,
    NO_ABSTRACT,
    SOURCE_ID_OFFSETS,
    UNTITLED,
)
from research_scrolls.data_sources.base_client import RequestContext
from research_scrolls.data_sources.base_source import LiveSource
from research_scrolls.helpers.date_helpers import today_iso
from research_scrolls.helpers.xml_helpers import (
    clean_text,
    collapse_whitespace,
    decode_entities,
    extract_between,
    extract_tag,
    find_attribute_values,
    get_attribute,
    iter_elements,
    iter_start_tags,
    strip_tags,
)
from research_scrolls.models.model_paper import Paper, SourceId

_MATH_RE = re.compile(r"\$([^$]+)\$")


class ArxivClient(LiveSource):
    """Client for the arXiv Atom query API."""

    source_id = SourceId.ARXIV

    async def _fetch_live(self, query: str, limit: int) -> list[Paper]:
        params = {
            "search_query": f"all:{query}",
            "start": 0,
            "max_results": limit,
            "sortBy": "relevance",
        }
        xml_text = await self._rest_get_xml(
            ARXIV_QUERY_URL,
            params,
            context=RequestContext(source=self._source_name, method="query"),
        )
        return self._parse_feed(xml_text)

    @classmethod
    def _parse_feed(cls, xml_text: str) -> list[Paper]:
        """Parse an Atom feed into Paper records, one per <entry>."""
        entries = xml_text.split("<entry>")[1:]
        return [cls._parse_entry(entry, index) for index, entry in enumerate(entries)]

    @staticmethod
    def _parse_entry(entry: str, index: int) -> Paper:
        arxiv_id = extract_between(entry, "<id>", "</id>").strip()

        authors = [
            clean_text(extract_tag(author, "name"))
            for _, author in iter_elements(entry, "author")
        ]

        categories = find_attribute_values(entry, "category", "term")
        journal = f"arXiv {categories[0]}" if categories else "arXiv"

        published = extract_between(entry, "<published>", "</published>").strip()

        return Paper(
            id=SOURCE_ID_OFFSETS["arxiv"] + index,
            title=clean_text(extract_between(entry, "<title>", "</title>")) or UNTITLED,
            abstract=_clean_abstract(extract_between(entry, "<summary>", "</summary>")),
            authors=", ".join(a for a in authors if a),
            url=_pdf_link(entry) or _abs_link(arxiv_id),
            published_date=published[:10] or today_iso(),
            journal=journal,
            source=SourceId.ARXIV,
        )


def _clean_abstract(raw: str) -> str:
    text = strip_tags(decode_entities(raw))
    text = text.replace("\\n", " ").replace('\\"', '"')
    text = _MATH_RE.sub(r"\1", text)
    return collapse_whitespace(text) or NO_ABSTRACT


def _pdf_link(entry: str) -> str:
    for attributes in iter_start_tags(entry, "link"):
        if get_attribute(attributes, "title") == "pdf":
            return get_attribute(attributes, "href")
    return ""


def _abs_link(arxiv_id: str) -> str:
    tail = arxiv_id.rstrip("/").split("/")[-1]
    return f"{ARXIV_ABS_URL}/{tail}" if tail else ""
