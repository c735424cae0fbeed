"""Pytest configuration and fixtures."""

import random
from collections.abc import Callable

import pytest

from research_scrolls.models.model_paper import Paper
from research_scrolls.services.synthetic import SyntheticPaperGenerator
from research_scrolls.utils.cache import ResponseCache


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(fake_clock: FakeClock) -> ResponseCache:
    """A response cache with the default TTL and size, driven by a fake clock."""
    return ResponseCache(clock=fake_clock)


@pytest.fixture
def generator() -> SyntheticPaperGenerator:
    """A seeded generator with a small corpus."""
    return SyntheticPaperGenerator(rng=random.Random(1234), corpus_size=60)


@pytest.fixture
def make_paper() -> Callable[..., Paper]:
    """Factory for fully populated papers with overridable fields."""

    def _make(**overrides) -> Paper:
        fields = {
            "id": 1,
            "title": "Graph Neural Networks for Protein Folding",
            "abstract": "We study message passing on residue graphs.",
            "authors": "Ada Lovelace, Alan Turing",
            "url": "https://example.com/papers/1",
            "published_date": "2024-02-01",
            "journal": "Journal of Research",
            "source": "local",
        }
        fields.update(overrides)
        return Paper(**fields)

    return _make
