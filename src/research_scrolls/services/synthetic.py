"""
Synthetic paper generator.

Produces plausible, fully populated Paper records from a handful of base
templates. Used three ways:
  1. the local corpus built once per process
  2. the fallback when a live source fails
  3. the only output of sources without a live API (IEEE, Springer, ...)
"""

import logging
import random
from collections.abc import Callable

from research_scrolls.constants import (
    LOCAL_CORPUS_SIZE,
    MAX_SYNTHETIC_PER_SOURCE,
    SOURCE_ID_OFFSETS,
)
from research_scrolls.data.templates import (
    BASE_PAPERS,
    CORPUS_SOURCE_WEIGHTS,
    DEFAULT_JOURNALS,
    FIRST_NAMES,
    INSTITUTIONS,
    JOURNALS,
    JOURNALS_BY_SOURCE,
    LAST_NAMES,
    TITLE_PREFIXES,
    TOPICS,
)
from research_scrolls.helpers.paper_helpers import filter_papers
from research_scrolls.models.model_paper import Paper

logger = logging.getLogger(__name__)

_URL_BUILDERS: dict[str, Callable[[int], str]] = {
    "arxiv": lambda i: f"https://arxiv.org/abs/{2400 + i // 100}.{i:05d}",
    "pubmed": lambda i: f"https://pubmed.ncbi.nlm.nih.gov/{30000000 + i}/",
    "ieee": lambda i: f"https://ieeexplore.ieee.org/document/{8000000 + i}/",
    "springer": lambda i: (
        f"https://link.springer.com/article/10.1007/"
        f"s{40000 + i}-{2023 + i // 1000}-{i % 1000}-{i % 10}"
    ),
    "sciencedirect": lambda i: (
        f"https://www.sciencedirect.com/science/article/pii/S{i * 13579:016d}"
    ),
    "semanticscholar": lambda i: f"https://www.semanticscholar.org/paper/{6000000 + i}",
    "biorxiv": lambda i: (
        f"https://www.biorxiv.org/content/10.1101/"
        f"{2023 + i // 100}.{i % 100:02d}.{i % 31 + 1:02d}.{i}"
    ),
    "nature": lambda i: (
        f"https://www.nature.com/articles/"
        f"s{41586 + i}-{2023 + i // 1000}-{i % 1000}-{i % 10}"
    ),
    "science": lambda i: f"https://science.org/doi/10.1126/science.{i * 1357 + 100000}",
}


def source_url(source: str, index: int) -> str:
    """Return a URL shaped like the given source's article links."""
    builder = _URL_BUILDERS.get(source)
    return builder(index) if builder else f"https://example.com/papers/{index}"


def source_journal(source: str, index: int) -> str:
    """Return one of the source's journal names, cycling by index."""
    journals = JOURNALS_BY_SOURCE.get(source, DEFAULT_JOURNALS)
    return journals[index % len(journals)]


class SyntheticPaperGenerator:
    """Randomized but always well-formed Paper records.

    Pass a seeded `random.Random` for reproducible output.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        corpus_size: int = LOCAL_CORPUS_SIZE,
    ) -> None:
        self.rng = rng or random.Random()
        self.corpus_size = corpus_size
        self._corpus: list[Paper] | None = None

    @property
    def corpus(self) -> list[Paper]:
        """The local corpus, generated on first access."""
        if self._corpus is None:
            self._corpus = self.generate_corpus(self.corpus_size)
            logger.debug("Generated local corpus of %d papers", len(self._corpus))
        return self._corpus

    def random_date(self) -> str:
        year = 2020 + self.rng.randrange(5)
        month = 1 + self.rng.randrange(12)
        day = 1 + self.rng.randrange(28)
        return f"{year}-{month:02d}-{day:02d}"

    def random_authors(self) -> str:
        authors = []
        for _ in range(self.rng.randint(2, 5)):
            name = f"{self.rng.choice(FIRST_NAMES)} {self.rng.choice(LAST_NAMES)}"
            if self.rng.random() > 0.5:
                name = f"{name} ({self.rng.choice(INSTITUTIONS)})"
            authors.append(name)
        return ", ".join(authors)

    def _weighted_source(self) -> str:
        return self.rng.choices(
            list(CORPUS_SOURCE_WEIGHTS), weights=list(CORPUS_SOURCE_WEIGHTS.values())
        )[0]

    def _varied_title(self, base_title: str, index: int) -> str:
        topic = self.rng.choice(TOPICS)
        prefix = self.rng.choice(TITLE_PREFIXES)
        version = index // len(BASE_PAPERS) + 1
        if self.rng.random() > 0.5:
            return f"{topic} Research: {prefix} {base_title} - Study {version}"
        parts = base_title.split(":")
        subtitle = parts[1].strip() if len(parts) > 1 and parts[1].strip() else base_title
        return f"{prefix} {topic}: {subtitle} (Version {version})"

    def generate_corpus(self, count: int) -> list[Paper]:
        """Generate `count` papers cycling through the base templates."""
        papers = []
        for i in range(count):
            base = BASE_PAPERS[i % len(BASE_PAPERS)]
            source = self._weighted_source()
            papers.append(
                Paper(
                    id=i + 1,
                    title=self._varied_title(base["title"], i),
                    abstract=base["abstract"],
                    authors=self.random_authors(),
                    url=source_url(source, i),
                    published_date=self.random_date(),
                    journal=self.rng.choice(JOURNALS),
                    source=source,
                )
            )
        return papers

    def generate_for_source(
        self,
        source: str,
        query: str = "",
        subject: str | None = None,
        limit: int = MAX_SYNTHETIC_PER_SOURCE,
        backfill: bool = False,
    ) -> list[Paper]:
        """Generate up to `limit` (capped at 100) papers that look like they came from `source`.

        Records are drawn from corpus entries matching the query and subject.
        If none match, the result is empty unless `backfill` is set, in which
        case the whole corpus is used so a positive limit always yields records.
        """
        count = min(limit, MAX_SYNTHETIC_PER_SOURCE)
        if count <= 0:
            return []

        pool = filter_papers(self.corpus, query, subject)
        if not pool and backfill:
            pool = self.corpus
        if not pool:
            return []
        offset = SOURCE_ID_OFFSETS.get(source, 0)
        return [
            self.rng.choice(pool).model_copy(
                update={
                    "id": offset + i,
                    "url": source_url(source, i),
                    "journal": source_journal(source, i),
                    "published_date": self.random_date(),
                    "source": source,
                }
            )
            for i in range(count)
        ]
