"""Web search result shapes.

A web search response bundles several independently ranked sections (web,
news, videos, discussions, FAQ, infobox, locations). Rich results hang off
``SearchResult`` and are only present when the API recognized a schema for
the page (a recipe, a product, a review, ...).
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from brave_search.models.common import (
    URL,
    DataProvider,
    Image,
    MetaURL,
    Mixed,
    Organization,
    Person,
    Price,
    Profile,
    Query,
    Rating,
    Result,
    ResultContainer,
    Shape,
    Thumbnail,
    Unit,
)
from brave_search.models.media import VideoData, VideoResult
from brave_search.scalars import DurationField, FlexibleNumberField, TimestampField


class NewsResult(Result):
    meta_url: MetaURL | None = None
    source: str = ""
    breaking: bool = False
    thumbnail: Thumbnail | None = None
    age: TimestampField = None


class ButtonResult(Shape):
    type: str = ""
    title: str = ""
    url: str = ""


class KnowledgeGraphProfile(Shape):
    title: str = ""
    description: str = ""
    url: str = ""
    thumbnail: URL | None = None


class DeepResult(Shape):
    news: list[NewsResult] = Field(default_factory=list)
    buttons: list[ButtonResult] = Field(default_factory=list)
    social: list[KnowledgeGraphProfile] = Field(default_factory=list)
    videos: list[VideoResult] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)


# --- Locations ---


class PostalAddress(Shape):
    type: str = ""
    country: str = ""
    postal_code: str = Field(default="", alias="postalCode")
    street_address: str = Field(default="", alias="streetAddress")
    address_region: str = Field(default="", alias="addressRegion")
    address_locality: str = Field(default="", alias="addressLocality")
    display_address: str = Field(default="", alias="displayAddress")


class DayOpeningHours(Shape):
    abbr_name: str = ""
    full_name: str = ""
    opens: str = ""
    closes: str = ""


class OpeningHours(Shape):
    current_day: list[DayOpeningHours] = Field(default_factory=list)
    days: list[list[DayOpeningHours]] = Field(default_factory=list)


class Contact(Shape):
    email: str = ""
    telephone: str = ""


class TripAdvisorReview(Shape):
    title: str = ""
    description: str = ""
    date: str = ""
    rating: Rating | None = None
    author: Person | None = None
    review_url: str = ""
    language: str = ""


class Reviews(Shape):
    results: list[TripAdvisorReview] = Field(default_factory=list)
    view_more_url: str = Field(default="", alias="viewMoreUrl")
    reviews_in_foreign_language: bool = False


class PictureResults(Shape):
    results: list[Thumbnail] = Field(default_factory=list)
    view_more_url: str = Field(default="", alias="viewMoreUrl")


class LocationResult(Result):
    type: str = ""
    provider_url: str = ""
    coordinates: list[float] = Field(default_factory=list)
    zoom_level: int = 0
    thumbnail: Thumbnail | None = None
    postal_address: PostalAddress | None = None
    opening_hours: OpeningHours | None = None
    contact: Contact | None = None
    price_range: str = ""
    rating: Rating | None = None
    distance: Unit | None = None
    profiles: list[DataProvider] = Field(default_factory=list)
    reviews: Reviews | None = None
    pictures: PictureResults | None = None
    serves_cuisine: list[str] = Field(default_factory=list)
    timezone: str = ""
    timezone_offset: float = 0.0


class Locations(Shape):
    type: str = ""
    results: list[LocationResult] = Field(default_factory=list)


# --- Rich results ---


class MovieData(Shape):
    name: str = ""
    description: str = ""
    url: str = ""
    thumbnail: Thumbnail | None = None
    release: str = ""
    directors: list[Person] = Field(default_factory=list)
    actors: list[Person] = Field(default_factory=list)
    rating: Rating | None = None


class QA(Shape):
    question: str = ""
    answer: str = ""
    title: str = ""
    url: str = ""
    meta_url: MetaURL | None = None


class FAQ(Shape):
    type: str = ""
    results: list[QA] = Field(default_factory=list)


class Answer(Shape):
    text: str = ""
    author: str = ""
    upvote_count: int = Field(default=0, alias="upvoteCount")
    downvote_count: int = Field(default=0, alias="downvoteCount")


class QAPage(Shape):
    question: str = ""
    answer: Answer | None = None


class Book(Shape):
    title: str = ""
    author: list[Person] = Field(default_factory=list)
    date: str = ""
    price: Price | None = None
    pages: FlexibleNumberField = 0
    publisher: Person | None = None
    rating: Rating | None = None


class Article(Shape):
    author: list[Person] = Field(default_factory=list)
    date: str = ""
    publisher: Organization | None = None
    thumbnail: Thumbnail | None = None
    is_accessible_for_free: bool = Field(default=False, alias="isAccessibleForFree")


class CreativeWork(Shape):
    name: str = ""
    thumbnail: Thumbnail | None = None
    rating: Rating | None = None


class MusicRecording(Shape):
    name: str = ""
    thumbnail: Thumbnail | None = None
    rating: Rating | None = None


class Review(Shape):
    type: str = ""
    name: str = ""
    thumbnail: Thumbnail | None = None
    description: str = ""
    rating: Rating | None = None


class Software(Shape):
    name: str = ""
    author: str = ""
    version: str = ""
    code_repository: str = Field(default="", alias="codeRepository")
    homepage: str = ""
    date_published: str = Field(default="", alias="datePublisher")
    is_npm: bool = False
    is_pypi: bool = False


class Offer(Shape):
    url: str = ""
    price: str = ""
    price_currency: str = Field(default="", alias="priceCurrency")


class Product(Shape):
    type: str = ""
    name: str = ""
    price: str = ""
    thumbnail: Thumbnail | None = None
    description: str = ""
    offers: list[Offer] = Field(default_factory=list)
    rating: Rating | None = None


class Recipe(Shape):
    title: str = ""
    description: str = ""
    thumbnail: Thumbnail | None = None
    url: str = ""
    domain: str = ""
    favicon: str = ""
    #: Total preparation plus cooking time.
    time: DurationField = None
    prep_time: str = ""
    cook_time: str = ""
    ready_in: str = ""
    ingredients: list[Any] = Field(default_factory=list)
    instructions: list[Any] = Field(default_factory=list)
    servings: FlexibleNumberField = 0
    calories: FlexibleNumberField = 0
    rating: Rating | None = None
    recipe_category: str = Field(default="", alias="recipeCategory")
    recipe_cuisine: str = Field(default="", alias="recipeCuisine")
    video: VideoData | None = None


class SearchResult(Result):
    type: str = ""
    subtype: str = ""
    deep_results: DeepResult | None = None
    schemas: Any = None
    meta_url: MetaURL | None = None
    thumbnail: Thumbnail | None = None
    age: TimestampField = None
    restaurant: LocationResult | None = None
    locations: Locations | None = None
    video: VideoData | None = None
    movie: MovieData | None = None
    faq: FAQ | None = None
    qa: QAPage | None = None
    book: Book | None = None
    rating: Rating | None = None
    article: Article | None = None
    recipe: Recipe | None = None
    product_cluster: list[Product] = Field(default_factory=list)
    cluster_type: str = ""
    cluster: list[Result] = Field(default_factory=list)
    creative_work: CreativeWork | None = None
    music_recording: MusicRecording | None = None
    review: Review | None = None
    software: Software | None = None
    content_type: str = ""


# --- Discussions and infobox ---


class ForumData(Shape):
    forum_name: str = ""
    num_answers: FlexibleNumberField = 0
    score: str = ""
    question: str = ""
    top_comment: str = ""


class DiscussionResult(SearchResult):
    data: ForumData | None = None


class GraphInfoBox(Result):
    type: str = ""
    position: int = 0
    label: str = ""
    category: str = ""
    long_desc: str = ""
    thumbnail: Thumbnail | None = None
    attributes: list[Any] = Field(default_factory=list)
    profiles: list[Profile] = Field(default_factory=list)
    website_url: str = ""
    attributes_shown: int = 0
    ratings: list[Rating] = Field(default_factory=list)
    providers: list[DataProvider] = Field(default_factory=list)
    distance: Unit | None = None
    images: list[Thumbnail] = Field(default_factory=list)
    movie: MovieData | None = None


class Summarizer(Shape):
    """Key for fetching the summary of a web search."""

    type: str = ""
    key: str = ""


class WebSearchResult(Shape):
    """Response of the web search endpoint."""

    type: str = ""
    discussions: ResultContainer[DiscussionResult] | None = None
    faq: FAQ | None = None
    infobox: ResultContainer[GraphInfoBox] | None = None
    locations: Locations | None = None
    mixed: Mixed | None = None
    news: ResultContainer[NewsResult] | None = None
    query: Query | None = None
    videos: ResultContainer[VideoResult] | None = None
    web: ResultContainer[SearchResult] | None = None
    summarizer: Summarizer | None = None
