"""Shapes shared by several endpoints."""

from __future__ import annotations

import types
from typing import Any, Generic, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, model_validator

from brave_search.scalars import TimestampField

T = TypeVar("T")


def _accepts_none(annotation: Any) -> bool:
    if annotation is Any or annotation is None or annotation is type(None):
        return True
    if get_origin(annotation) in (Union, types.UnionType):
        return type(None) in get_args(annotation)
    return False


class Shape(BaseModel):
    """Base for every decoded response shape.

    Shapes are immutable, ignore keys they do not know about, and default
    every field so partial payloads still decode. A JSON ``null`` sent for a
    field that cannot hold ``None`` leaves that field at its default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls_for_non_optional_fields(cls, data: Any) -> Any:
        """Treat ``null`` as absent unless the field is Optional."""
        if not isinstance(data, dict):
            return data
        non_nullable: set[str] = set()
        for name, field in cls.model_fields.items():
            if not _accepts_none(field.annotation):
                non_nullable.add(name)
                if field.alias:
                    non_nullable.add(field.alias)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key not in non_nullable
        }


class Language(Shape):
    main: str = ""


class Query(Shape):
    """How the API understood the search term."""

    original: str = ""
    show_strict_warning: bool = False
    altered: str = ""
    safesearch: bool = False
    is_navigational: bool = False
    is_geolocal: bool = False
    local_decision: str = ""
    local_locations_idx: int = 0
    is_trending: bool = False
    is_news_breaking: bool = False
    ask_for_location: bool = False
    language: Language | None = None
    spellcheck_off: bool = False
    country: str = ""
    bad_results: bool = False
    should_fallback: bool = False
    lat: str = ""
    long: str = ""
    postal_code: str = ""
    city: str = ""
    state: str = ""
    header_country: str = ""
    more_results_available: bool = False
    custom_location_label: str = ""
    reddit_cluster: str = ""
    summary_key: str = ""


class ResultContainer(Shape, Generic[T]):
    type: str = ""
    results: list[T] = Field(default_factory=list)
    mutated_by_goggles: bool = False


class ResultReference(Shape):
    type: str = ""
    index: int = 0
    all: bool = False


class Mixed(Shape):
    """Preferred ranking order of result sections."""

    type: str = ""
    main: list[ResultReference] = Field(default_factory=list)
    top: list[ResultReference] = Field(default_factory=list)
    side: list[ResultReference] = Field(default_factory=list)


class MetaURL(Shape):
    scheme: str = ""
    netloc: str = ""
    hostname: str = ""
    favicon: str = ""
    path: str = ""


class Thumbnail(Shape):
    src: str = ""
    height: int = 0
    width: int = 0
    background_color: str = Field(default="", alias="bg_color")
    original: str = ""
    logo: bool = False
    duplicated: bool = False
    theme: str = ""


class Profile(Shape):
    name: str = ""
    long_name: str = ""
    url: str = ""
    image: str = Field(default="", alias="img")


class Result(Shape):
    """Fields common to most result kinds."""

    title: str = ""
    url: str = ""
    is_source_local: bool = False
    is_source_both: bool = False
    description: str = ""
    page_age: TimestampField = None
    page_fetched: str = ""
    profile: Profile | None = None
    language: str = ""
    family_friendly: bool = False


class Rating(Shape):
    rating_value: float = Field(default=0.0, alias="ratingValue")
    best_rating: float = Field(default=0.0, alias="bestRating")
    review_count: int = Field(default=0, alias="reviewCount")
    profile: Profile | None = None
    is_tripadvisor: bool = False


class Person(Shape):
    type: str = ""
    name: str = ""
    url: str = ""
    thumbnail: Thumbnail | None = None


class Organization(Shape):
    type: str = ""
    name: str = ""
    thumbnail: Thumbnail | None = None


class DataProvider(Shape):
    type: str = ""
    name: str = ""
    url: str = ""
    long_name: str = ""
    image: str = Field(default="", alias="img")


class Unit(Shape):
    value: float = 0.0
    units: str = ""


class MobileURLItem(Shape):
    original: str = ""
    amp: str = ""
    android: str = ""
    ios: str = ""


class URL(Shape):
    original: str = ""
    display: str = ""
    alternatives: list[str] = Field(default_factory=list)
    canonical: str = ""
    mobile: MobileURLItem | None = None


class ImageProperties(Shape):
    url: str = ""
    resized: str = ""
    height: int = 0
    width: int = 0
    format: str = ""
    content_size: str = ""
    placeholder: str = ""


class Image(Shape):
    thumbnail: Thumbnail | None = None
    url: str = ""
    properties: ImageProperties | None = None
    text: str = ""


class Price(Shape):
    price: str = ""
    price_currency: str = ""
