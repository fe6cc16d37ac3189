"""Image and video result shapes."""

from __future__ import annotations

from brave_search.models.common import (
    ImageProperties,
    MetaURL,
    Query,
    Result,
    ResultContainer,
    Shape,
    Thumbnail,
)
from brave_search.scalars import DurationField, TimestampField, ViewCountField


class VideoData(Shape):
    duration: DurationField = None
    views: ViewCountField = 0
    creator: str = ""
    publisher: str = ""
    thumbnail: Thumbnail | None = None


class VideoResult(Result):
    type: str = ""
    video: VideoData | None = None
    meta_url: MetaURL | None = None
    thumbnail: Thumbnail | None = None
    age: TimestampField = None


class ImageResult(Shape):
    type: str = ""
    title: str = ""
    url: str = ""
    source: str = ""
    page_fetched: TimestampField = None
    thumbnail: Thumbnail | None = None
    properties: ImageProperties | None = None
    meta_url: MetaURL | None = None


class ImageSearchResult(ResultContainer[ImageResult]):
    """Response of the image search endpoint."""

    query: Query | None = None


class VideoSearchResult(ResultContainer[VideoResult]):
    """Response of the video search endpoint."""

    query: Query | None = None
