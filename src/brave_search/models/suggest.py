"""Suggest and spellcheck result shapes."""

from __future__ import annotations

from pydantic import Field

from brave_search.models.common import Query, Shape


class SuggestResult(Shape):
    query: str = Field(default="", alias="string")
    is_entity: bool = False
    title: str = ""
    description: str = ""
    image: str = Field(default="", alias="img")


class SuggestSearchResult(Shape):
    """Response of the suggest endpoint."""

    type: str = ""
    query: Query | None = None
    results: list[SuggestResult] = Field(default_factory=list)


class SpellcheckResultItem(Shape):
    query: str = ""


class SpellcheckResult(Shape):
    """Response of the spellcheck endpoint."""

    type: str = ""
    query: Query | None = None
    results: list[SpellcheckResultItem] = Field(default_factory=list)
