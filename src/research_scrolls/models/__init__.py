"""Data models for ResearchScrolls."""

from research_scrolls.models.model_paper import Paper, SourceDescriptor, SourceId

__all__ = ["Paper", "SourceDescriptor", "SourceId"]
