"""ResearchScrolls: aggregate papers from many research databases."""

__version__ = "0.1.0"
