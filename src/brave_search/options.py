"""Search options and their rendering into query parameters and headers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, tzinfo
from enum import Enum
from typing import Any

from brave_search._http import SUBSCRIPTION_TOKEN_HEADER
from brave_search.errors import ConfigurationError


class Freshness(str, Enum):
    """Filters results by when they were discovered."""

    PAST_DAY = "pd"
    PAST_WEEK = "pw"
    PAST_MONTH = "pm"
    PAST_YEAR = "py"


class ResultFilter(str, Enum):
    """Result sections to include in a web search response."""

    DISCUSSIONS = "discussions"
    FAQ = "faq"
    INFOBOX = "infobox"
    NEWS = "news"
    VIDEOS = "videos"
    WEB = "web"
    IMAGES = "images"
    QUERY = "query"
    SUMMARIZER = "summarizer"
    LOCATIONS = "locations"


class Safesearch(str, Enum):
    OFF = "off"
    MODERATE = "moderate"
    STRICT = "strict"


class UnitType(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True)
class SearchOptions:
    """Optional arguments for search calls.

    Each endpoint reads only the options it supports; the rest are ignored.
    Location fields are sent as ``X-Loc-*`` headers.
    """

    country: str | None = None
    #: Sent as ``search_lang`` for web/image/video and ``lang`` for suggest/spellcheck.
    lang: str | None = None
    ui_lang: str | None = None
    count: int | None = None
    offset: int | None = None
    safesearch: Safesearch = Safesearch.MODERATE
    #: Mutually exclusive with *custom_freshness*.
    freshness: Freshness | None = None
    #: Inclusive ``(start, end)`` discovery window.
    custom_freshness: tuple[date, date] | None = None
    text_decorations: bool | None = None
    result_filter: tuple[ResultFilter, ...] = ()
    goggles_id: str | None = None
    units: UnitType | None = None
    extra_snippets: bool = False
    rich: bool = False
    entity_info: bool = False
    no_cache: bool = False
    user_agent: str | None = None
    loc_latitude: float | None = None
    loc_longitude: float | None = None
    loc_timezone: tzinfo | str | None = None
    loc_city: str | None = None
    loc_state: str | None = None
    loc_state_name: str | None = None
    loc_country: str | None = None
    loc_postal_code: str | None = None

    def __post_init__(self) -> None:
        """Validate option shapes early for clear errors."""
        if self.count is not None and self.count < 1:
            raise ConfigurationError(
                f"count must be >= 1, got {self.count}",
                hint="Leave count unset to use the endpoint default.",
            )
        if self.offset is not None and self.offset < 0:
            raise ConfigurationError(
                f"offset must be >= 0, got {self.offset}",
                hint="offset is the zero-based page index.",
            )
        if self.freshness is not None and self.custom_freshness is not None:
            raise ConfigurationError(
                "freshness and custom_freshness are mutually exclusive",
                hint="Use Freshness.PAST_WEEK-style presets or a (start, end) range, not both.",
            )
        if self.custom_freshness is not None:
            start, end = self.custom_freshness
            if start > end:
                raise ConfigurationError(
                    f"custom_freshness starts after it ends: {start} > {end}",
                    hint="Pass custom_freshness=(start, end) with start <= end.",
                )
        if self.loc_latitude is not None and not -90 <= self.loc_latitude <= 90:
            raise ConfigurationError(
                f"loc_latitude out of range: {self.loc_latitude}",
                hint="Latitude must be within [-90, 90].",
            )
        if self.loc_longitude is not None and not -180 <= self.loc_longitude <= 180:
            raise ConfigurationError(
                f"loc_longitude out of range: {self.loc_longitude}",
                hint="Longitude must be within [-180, 180].",
            )

    def freshness_param(self) -> str | None:
        """Render the freshness filter, e.g. ``pw`` or ``2024-01-01to2024-02-01``."""
        if self.freshness is not None:
            return self.freshness.value
        if self.custom_freshness is not None:
            start, end = self.custom_freshness
            return f"{start:%Y-%m-%d}to{end:%Y-%m-%d}"
        return None

    def for_image_search(self) -> SearchOptions:
        """Image search has no moderate setting; it falls back to strict."""
        if self.safesearch is Safesearch.MODERATE:
            return replace(self, safesearch=Safesearch.STRICT)
        return self

    def headers(self, subscription_token: str) -> dict[str, str]:
        """Request headers for these options."""
        headers = {
            "Accept": "application/json",
            SUBSCRIPTION_TOKEN_HEADER: subscription_token,
        }
        if self.no_cache:
            headers["Cache-Control"] = "no-cache"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        if self.loc_latitude is not None:
            headers["X-Loc-Lat"] = f"{self.loc_latitude:.3f}"
        if self.loc_longitude is not None:
            headers["X-Loc-Long"] = f"{self.loc_longitude:.3f}"
        if self.loc_timezone is not None:
            headers["X-Loc-Timezone"] = _timezone_name(self.loc_timezone)
        optional = {
            "X-Loc-City": self.loc_city,
            "X-Loc-State": self.loc_state,
            "X-Loc-State-Name": self.loc_state_name,
            "X-Loc-Country": self.loc_country,
            "X-Loc-Postal-Code": self.loc_postal_code,
        }
        headers.update({name: value for name, value in optional.items() if value})
        return headers


def _timezone_name(tz: tzinfo | str) -> str:
    if isinstance(tz, str):
        return tz
    # zoneinfo.ZoneInfo exposes the IANA name as ``key``.
    return getattr(tz, "key", None) or str(tz)


def _compact(params: dict[str, Any]) -> dict[str, str]:
    """Drop unset values and render the rest the way the API expects."""
    rendered: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value is False or value == "":
            continue
        if isinstance(value, bool):
            rendered[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            rendered[key] = str(value.value)
        else:
            rendered[key] = str(value)
    return rendered


def web_search_params(term: str, options: SearchOptions) -> dict[str, str]:
    """Query parameters for the web, image and video endpoints."""
    params = _compact(
        {
            "q": term,
            "country": options.country,
            "search_lang": options.lang,
            "ui_lang": options.ui_lang,
            "count": options.count,
            "offset": options.offset,
            "safesearch": options.safesearch,
            "freshness": options.freshness_param(),
            "goggles_id": options.goggles_id,
            "units": options.units,
            "extra_snippets": options.extra_snippets,
            "result_filter": ",".join(f.value for f in options.result_filter),
        }
    )
    # text_decorations defaults to true server-side, so an explicit false matters.
    if options.text_decorations is not None:
        params["text_decorations"] = "true" if options.text_decorations else "false"
    return params


def suggest_params(term: str, options: SearchOptions) -> dict[str, str]:
    return _compact(
        {
            "q": term,
            "country": options.country,
            "lang": options.lang,
            "count": options.count,
            "rich": options.rich,
        }
    )


def spellcheck_params(term: str, options: SearchOptions) -> dict[str, str]:
    return _compact({"q": term, "country": options.country, "lang": options.lang})


def summarizer_params(key: str, options: SearchOptions) -> dict[str, str]:
    return {"key": key, "entity_info": "true" if options.entity_info else "false"}
