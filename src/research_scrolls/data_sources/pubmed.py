"""
PubMed API client.

Three calls per search:
  1. search          : esearch (JSON), query -> PMIDs
  2. fetch_articles  : efetch (XML), PMIDs -> article blocks with abstracts
  3. fetch_summaries : esummary (JSON), PMIDs -> title/authors/journal/date

The summary is optional: if it fails the same fields are read from the XML.
"""

from __future__ import annotations

import logging
from typing import Any

from research_scrolls.constants import (
    ABSTRACT_NOT_AVAILABLE,
    PUBMED_ARTICLE_URL,
    PUBMED_DEFAULT_JOURNAL,
    PUBMED_FETCH_URL,
    PUBMED_SEARCH_URL,
    PUBMED_SUMMARY_URL,
    SOURCE_ID_OFFSETS,
    UNTITLED,
)
from research_scrolls.data_sources.base_client import DataSourceError, RequestContext
from research_scrolls.data_sources.base_source import LiveSource
from research_scrolls.helpers.date_helpers import (
    build_iso_date,
    normalize_pubdate,
    today_iso,
)
from research_scrolls.helpers.xml_helpers import (
    clean_text,
    extract_tag,
    get_attribute,
    iter_elements,
)
from research_scrolls.models.model_paper import Paper, SourceId

logger = logging.getLogger("research_scrolls.data_sources.pubmed")


class PubMedClient(LiveSource):
    """Client for querying PubMed/NCBI E-utilities."""

    source_id = SourceId.PUBMED

    async def _fetch_live(self, query: str, limit: int) -> list[Paper]:
        pmids = await self.search(query, limit)
        if not pmids:
            return []

        xml_text = await self.fetch_articles(pmids)
        summaries = await self.fetch_summaries(pmids)
        return self._build_papers(pmids, xml_text, summaries)

    # -- Upstream calls -------------------------------------------------------

    async def search(self, query: str, max_results: int) -> list[str]:
        """Search PubMed and return list of PMIDs."""
        params = {
            "db": "pubmed",
            "term": query,
            "retmax": max_results,
            "retmode": "json",
        }
        data = await self._rest_get(
            PUBMED_SEARCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="esearch"),
        )
        idlist = data.get("esearchresult", {}).get("idlist", [])
        return [str(pmid) for pmid in idlist]

    async def fetch_articles(self, pmids: list[str]) -> str:
        """Fetch the raw efetch XML for the given PMIDs."""
        params = {"db": "pubmed", "id": ",".join(pmids), "retmode": "xml"}
        return await self._rest_get_xml(
            PUBMED_FETCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="efetch"),
        )

    async def fetch_summaries(self, pmids: list[str]) -> dict[str, dict[str, Any]]:
        """Fetch esummary records keyed by PMID; {} if the call fails."""
        params = {"db": "pubmed", "id": ",".join(pmids), "retmode": "json"}
        try:
            data = await self._rest_get(
                PUBMED_SUMMARY_URL,
                params,
                context=RequestContext(source=self._source_name, method="esummary"),
            )
        except DataSourceError as e:
            logger.warning("esummary failed, using efetch fields only: %s", e)
            return {}

        result = data.get("result", {}) if isinstance(data, dict) else {}
        return {
            pmid: result[pmid] for pmid in pmids if isinstance(result.get(pmid), dict)
        }

    # -- Parsing --------------------------------------------------------------

    @classmethod
    def _build_papers(
        cls,
        pmids: list[str],
        xml_text: str,
        summaries: dict[str, dict[str, Any]],
    ) -> list[Paper]:
        """Merge efetch XML and esummary JSON into one Paper per PMID, in PMID order."""
        articles = cls._split_articles(xml_text)
        return [
            cls._parse_article(
                pmid, index, articles.get(pmid, ""), summaries.get(pmid, {})
            )
            for index, pmid in enumerate(pmids)
        ]

    @staticmethod
    def _split_articles(xml_text: str) -> dict[str, str]:
        """Map each PMID to the text of its <PubmedArticle> block."""
        articles: dict[str, str] = {}
        for _, block in iter_elements(xml_text, "PubmedArticle"):
            pmid = clean_text(extract_tag(block, "PMID"))
            if pmid and pmid not in articles:
                articles[pmid] = block
        return articles

    @classmethod
    def _parse_article(
        cls, pmid: str, index: int, block: str, summary: dict[str, Any]
    ) -> Paper:
        return Paper(
            id=SOURCE_ID_OFFSETS["pubmed"] + index,
            title=cls._title(block, summary),
            abstract=cls._abstract(block),
            authors=cls._authors(block, summary),
            url=f"{PUBMED_ARTICLE_URL}/{pmid}/",
            published_date=cls._published_date(block, summary),
            journal=cls._journal(block, summary),
            source=SourceId.PUBMED,
        )

    @staticmethod
    def _abstract(block: str) -> str:
        """Join the <AbstractText> sections, prefixing labelled ones."""
        sections = []
        for attributes, inner in iter_elements(extract_tag(block, "Abstract"), "AbstractText"):
            text = clean_text(inner)
            if not text:
                continue
            label = get_attribute(attributes, "Label")
            sections.append(f"{label}: {text}" if label else text)
        return " ".join(sections) or ABSTRACT_NOT_AVAILABLE

    @staticmethod
    def _title(block: str, summary: dict[str, Any]) -> str:
        title = clean_text(str(summary.get("title") or ""))
        return title or clean_text(extract_tag(block, "ArticleTitle")) or UNTITLED

    @staticmethod
    def _authors(block: str, summary: dict[str, Any]) -> str:
        summary_authors = summary.get("authors")
        if isinstance(summary_authors, list) and summary_authors:
            return ", ".join(
                a["name"] for a in summary_authors if isinstance(a, dict) and a.get("name")
            )

        names = []
        for _, author in iter_elements(block, "Author"):
            fore = clean_text(extract_tag(author, "ForeName"))
            last = clean_text(extract_tag(author, "LastName"))
            name = f"{fore} {last}".strip() or clean_text(
                extract_tag(author, "CollectiveName")
            )
            if name:
                names.append(name)
        return ", ".join(names)

    @staticmethod
    def _journal(block: str, summary: dict[str, Any]) -> str:
        return (
            summary.get("fulljournalname")
            or summary.get("source")
            or clean_text(extract_tag(extract_tag(block, "Journal"), "Title"))
            or PUBMED_DEFAULT_JOURNAL
        )

    @staticmethod
    def _published_date(block: str, summary: dict[str, Any]) -> str:
        pubdate = summary.get("pubdate")
        if pubdate:
            return normalize_pubdate(str(pubdate))

        pub_date = extract_tag(block, "PubDate")
        iso = build_iso_date(
            clean_text(extract_tag(pub_date, "Year")),
            clean_text(extract_tag(pub_date, "Month")),
            clean_text(extract_tag(pub_date, "Day")),
        )
        if iso:
            return iso
        medline_date = clean_text(extract_tag(pub_date, "MedlineDate"))
        return normalize_pubdate(medline_date) if medline_date else today_iso()
