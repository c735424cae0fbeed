"""Local corpus source: an in-memory synthetic corpus filtered by query and subject."""

from research_scrolls.constants import MAX_SYNTHETIC_PER_SOURCE
from research_scrolls.data_sources.base_source import PaperSource
from research_scrolls.helpers.paper_helpers import filter_papers
from research_scrolls.models.model_paper import Paper, SourceId
from research_scrolls.services.synthetic import SyntheticPaperGenerator


class LocalCorpusSource(PaperSource):
    """Zero-latency source over the generator's corpus (or an injected one)."""

    source_id = SourceId.LOCAL

    def __init__(
        self,
        generator: SyntheticPaperGenerator,
        corpus: list[Paper] | None = None,
    ) -> None:
        super().__init__(generator)
        self._corpus = corpus

    @property
    def corpus(self) -> list[Paper]:
        return self._corpus if self._corpus is not None else self.generator.corpus

    async def fetch(
        self,
        query: str,
        subject: str | None = None,
        limit: int = MAX_SYNTHETIC_PER_SOURCE,
    ) -> list[Paper]:
        return [
            paper.model_copy(update={"source": SourceId.LOCAL})
            for paper in filter_papers(self.corpus, query, subject, limit)
        ]
