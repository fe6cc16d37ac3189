"""Decoded response shapes for every search endpoint."""

from .common import (
    URL,
    DataProvider,
    Image,
    ImageProperties,
    Language,
    MetaURL,
    Mixed,
    MobileURLItem,
    Organization,
    Person,
    Price,
    Profile,
    Query,
    Rating,
    Result,
    ResultContainer,
    ResultReference,
    Shape,
    Thumbnail,
    Unit,
)
from .media import (
    ImageResult,
    ImageSearchResult,
    VideoData,
    VideoResult,
    VideoSearchResult,
)
from .suggest import (
    SpellcheckResult,
    SpellcheckResultItem,
    SuggestResult,
    SuggestSearchResult,
)
from .summarizer import (
    SummarizerSearchResult,
    SummaryAnswer,
    SummaryContext,
    SummaryEnrichments,
    SummaryEntity,
    SummaryMessage,
    TextLocation,
)
from .web import (
    FAQ,
    QA,
    Answer,
    Article,
    Book,
    ButtonResult,
    Contact,
    CreativeWork,
    DayOpeningHours,
    DeepResult,
    DiscussionResult,
    ForumData,
    GraphInfoBox,
    KnowledgeGraphProfile,
    LocationResult,
    Locations,
    MovieData,
    MusicRecording,
    NewsResult,
    Offer,
    OpeningHours,
    PictureResults,
    PostalAddress,
    Product,
    QAPage,
    Recipe,
    Review,
    Reviews,
    SearchResult,
    Software,
    Summarizer,
    TripAdvisorReview,
    WebSearchResult,
)

__all__ = [
    "FAQ",
    "QA",
    "URL",
    "Answer",
    "Article",
    "Book",
    "ButtonResult",
    "Contact",
    "CreativeWork",
    "DataProvider",
    "DayOpeningHours",
    "DeepResult",
    "DiscussionResult",
    "ForumData",
    "GraphInfoBox",
    "Image",
    "ImageProperties",
    "ImageResult",
    "ImageSearchResult",
    "KnowledgeGraphProfile",
    "Language",
    "LocationResult",
    "Locations",
    "MetaURL",
    "Mixed",
    "MobileURLItem",
    "MovieData",
    "MusicRecording",
    "NewsResult",
    "Offer",
    "OpeningHours",
    "Organization",
    "Person",
    "PictureResults",
    "PostalAddress",
    "Price",
    "Product",
    "Profile",
    "QAPage",
    "Query",
    "Rating",
    "Recipe",
    "Result",
    "ResultContainer",
    "ResultReference",
    "Review",
    "Reviews",
    "SearchResult",
    "Shape",
    "Software",
    "SpellcheckResult",
    "SpellcheckResultItem",
    "SuggestResult",
    "SuggestSearchResult",
    "Summarizer",
    "SummarizerSearchResult",
    "SummaryAnswer",
    "SummaryContext",
    "SummaryEnrichments",
    "SummaryEntity",
    "SummaryMessage",
    "TextLocation",
    "Thumbnail",
    "TripAdvisorReview",
    "Unit",
    "VideoData",
    "VideoResult",
    "VideoSearchResult",
    "WebSearchResult",
]
