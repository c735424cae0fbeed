"""Query composition and record matching shared by the local corpus and fallbacks."""

from collections.abc import Iterable

from research_scrolls.constants import ALL_SUBJECTS, FALLBACK_QUERY
from research_scrolls.models.model_paper import Paper


def has_subject(subject: str | None) -> bool:
    """True when `subject` is a real filter rather than absent or "All"."""
    return bool(subject) and subject != ALL_SUBJECTS


def compose_query(query: str, subject: str | None = None) -> str:
    """Build the effective upstream query from the query and optional subject.

    Empty results fall back to "recent" so upstream APIs always get a term.
    """
    composed = f"{query} {subject}" if has_subject(subject) else query
    return composed.strip() or FALLBACK_QUERY


def paper_matches(paper: Paper, term: str) -> bool:
    """Case-insensitive substring match against title, abstract, authors and journal."""
    needle = term.lower()
    return (
        needle in paper.title.lower()
        or needle in paper.abstract.lower()
        or needle in paper.authors.lower()
        or needle in paper.journal.lower()
    )


def filter_papers(
    papers: Iterable[Paper],
    query: str = "",
    subject: str | None = None,
    limit: int | None = None,
) -> list[Paper]:
    """Filter papers by subject and query; a blank query or "All" subject matches everything."""
    filtered = list(papers)
    if has_subject(subject):
        filtered = [p for p in filtered if paper_matches(p, subject)]
    if query and query.strip():
        filtered = [p for p in filtered if paper_matches(p, query.strip())]
    if limit is not None:
        filtered = filtered[:limit]
    return filtered
