"""
Pydantic models for normalized paper records.

These are the data contracts between the source adapters and whoever renders
the results. Consumers receive these models - they never see raw API responses.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from research_scrolls.constants import UNTITLED


class SourceId(StrEnum):
    """Identifier of a paper source."""

    LOCAL = "local"
    ARXIV = "arxiv"
    PUBMED = "pubmed"
    SEMANTIC_SCHOLAR = "semanticscholar"
    IEEE = "ieee"
    SPRINGER = "springer"
    SCIENCEDIRECT = "sciencedirect"
    NATURE = "nature"
    SCIENCE = "science"
    BIORXIV = "biorxiv"


class Paper(BaseModel):
    """A single normalized paper record, whatever source it came from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: int = 0  # source-scoped offset + index; not globally unique
    title: str = UNTITLED
    abstract: str = ""  # may hold a "No abstract available" style sentinel
    authors: str = ""  # comma-joined display string
    url: str = ""
    published_date: str = Field(default="", alias="publishedDate")  # YYYY-MM-DD
    journal: str = ""
    source: SourceId = SourceId.LOCAL

    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        for field_name, field_info in cls.model_fields.items():
            key = field_info.alias if field_info.alias in values else field_name
            if key in values and values[key] is None:
                values[key] = field_info.get_default(call_default_factory=True)
        return values

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return value.strip() or UNTITLED


class SourceDescriptor(BaseModel):
    """Static description of a source, used to drive source selection."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: SourceId
    name: str
