"""
Derivation result models.
"""

from enum import Enum

from pydantic import BaseModel, Field


class DerivationSource(str, Enum):
    """Which path produced a derived value."""

    MODEL = "model"  # Accepted model response
    FALLBACK = "fallback"  # Heuristic extractor or truncated content
    PLACEHOLDER = "placeholder"  # Locale placeholder title
    SKIPPED = "skipped"  # Content too short for a summary


class DerivationResult(BaseModel):
    """Title and summary derived from one content string."""

    title: str = Field(..., description="Derived title, never empty")
    summary: str = Field(..., description="Derived summary, empty for short content")
    title_source: DerivationSource
    summary_source: DerivationSource
