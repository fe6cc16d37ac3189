"""Summarizer result shapes.

Highlights point into the summary text by character offsets, which the API
has been seen sending both as numbers and as strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from brave_search.models.common import Image, MetaURL, Shape
from brave_search.scalars import FlexibleNumberField


class TextLocation(Shape):
    start: FlexibleNumberField = 0
    end: FlexibleNumberField = 0


class SummaryMessage(Shape):
    type: str = ""
    data: str = ""


class SummaryAnswer(Shape):
    answer: str = ""
    score: float = 0.0
    highlight: TextLocation | None = None


class SummaryEntity(Shape):
    uuid: str = ""
    name: str = ""
    url: str = ""
    text: str = ""
    images: list[Image] = Field(default_factory=list)
    highlight: list[TextLocation] = Field(default_factory=list)


class SummaryContext(Shape):
    title: str = ""
    url: str = ""
    meta_url: MetaURL | None = None


class SummaryEnrichments(Shape):
    raw: str = ""
    images: list[Image] = Field(default_factory=list)
    qa: list[SummaryAnswer] = Field(default_factory=list)
    entities: list[SummaryEntity] = Field(default_factory=list)
    context: list[SummaryContext] = Field(default_factory=list)


class SummarizerSearchResult(Shape):
    """Response of the summarizer endpoint."""

    type: str = ""
    status: str = ""
    title: str = ""
    summary: list[SummaryMessage] = Field(default_factory=list)
    enrichments: SummaryEnrichments | None = None
    followups: list[str] = Field(default_factory=list)
    entities_info: dict[str, Any] = Field(default_factory=dict)
