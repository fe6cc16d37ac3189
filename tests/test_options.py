"""SearchOptions validation and rendering into query parameters and headers."""

from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from brave_search._http import SUBSCRIPTION_TOKEN_HEADER
from brave_search.errors import ConfigurationError
from brave_search.options import (
    Freshness,
    ResultFilter,
    Safesearch,
    SearchOptions,
    UnitType,
    spellcheck_params,
    suggest_params,
    summarizer_params,
    web_search_params,
)

pytestmark = pytest.mark.unit


# =============================================================================
# Validation
# =============================================================================


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"count": 0}, "count"),
        ({"offset": -1}, "offset"),
        (
            {
                "freshness": Freshness.PAST_DAY,
                "custom_freshness": (date(2024, 1, 1), date(2024, 2, 1)),
            },
            "mutually exclusive",
        ),
        ({"custom_freshness": (date(2024, 2, 1), date(2024, 1, 1))}, "starts after"),
        ({"loc_latitude": 90.5}, "loc_latitude"),
        ({"loc_longitude": -181.0}, "loc_longitude"),
    ],
)
def test_invalid_options_raise_configuration_error(kwargs, match) -> None:
    with pytest.raises(ConfigurationError, match=match) as exc:
        SearchOptions(**kwargs)

    assert exc.value.hint is not None


def test_defaults() -> None:
    opts = SearchOptions()

    assert opts.safesearch is Safesearch.MODERATE
    assert opts.freshness_param() is None
    assert opts.result_filter == ()


# =============================================================================
# Query parameters
# =============================================================================


def test_web_search_params_with_defaults_only_sends_term_and_safesearch() -> None:
    assert web_search_params("brave", SearchOptions()) == {
        "q": "brave",
        "safesearch": "moderate",
    }


def test_web_search_params_render_every_option() -> None:
    opts = SearchOptions(
        country="us",
        lang="en",
        ui_lang="en-US",
        count=20,
        offset=2,
        safesearch=Safesearch.OFF,
        freshness=Freshness.PAST_WEEK,
        text_decorations=False,
        result_filter=(ResultFilter.WEB, ResultFilter.NEWS),
        goggles_id="https://example.com/goggle",
        units=UnitType.METRIC,
        extra_snippets=True,
    )

    assert web_search_params("brave", opts) == {
        "q": "brave",
        "country": "us",
        "search_lang": "en",
        "ui_lang": "en-US",
        "count": "20",
        "offset": "2",
        "safesearch": "off",
        "freshness": "pw",
        "goggles_id": "https://example.com/goggle",
        "units": "metric",
        "extra_snippets": "true",
        "result_filter": "web,news",
        "text_decorations": "false",
    }


def test_custom_freshness_renders_date_range() -> None:
    opts = SearchOptions(custom_freshness=(date(2024, 1, 1), date(2024, 2, 15)))

    assert opts.freshness_param() == "2024-01-01to2024-02-15"
    assert web_search_params("x", opts)["freshness"] == "2024-01-01to2024-02-15"


def test_offset_zero_is_sent() -> None:
    assert web_search_params("x", SearchOptions(offset=0))["offset"] == "0"


def test_suggest_params_use_lang_and_rich() -> None:
    opts = SearchOptions(country="de", lang="de", count=5, rich=True, ui_lang="ignored")

    assert suggest_params("hallo", opts) == {
        "q": "hallo",
        "country": "de",
        "lang": "de",
        "count": "5",
        "rich": "true",
    }


def test_spellcheck_params_ignore_unsupported_options() -> None:
    opts = SearchOptions(country="us", lang="en", count=5, rich=True)

    assert spellcheck_params("helo", opts) == {"q": "helo", "country": "us", "lang": "en"}


@pytest.mark.parametrize(("entity_info", "rendered"), [(False, "false"), (True, "true")])
def test_summarizer_params_always_send_entity_info(entity_info, rendered) -> None:
    opts = SearchOptions(entity_info=entity_info)

    assert summarizer_params("k", opts) == {"key": "k", "entity_info": rendered}


# =============================================================================
# Image search safesearch
# =============================================================================


def test_image_search_upgrades_moderate_to_strict() -> None:
    assert SearchOptions().for_image_search().safesearch is Safesearch.STRICT


@pytest.mark.parametrize("level", [Safesearch.OFF, Safesearch.STRICT])
def test_image_search_keeps_explicit_levels(level: Safesearch) -> None:
    opts = SearchOptions(safesearch=level)

    assert opts.for_image_search() is opts


# =============================================================================
# Headers
# =============================================================================


def test_headers_minimal() -> None:
    assert SearchOptions().headers("token") == {
        "Accept": "application/json",
        SUBSCRIPTION_TOKEN_HEADER: "token",
    }


def test_headers_with_location_and_caching() -> None:
    opts = SearchOptions(
        no_cache=True,
        user_agent="brave-search-tests/1.0",
        loc_latitude=42.331429,
        loc_longitude=-83.045753,
        loc_timezone=ZoneInfo("America/Detroit"),
        loc_city="Detroit",
        loc_state="MI",
        loc_state_name="Michigan",
        loc_country="US",
        loc_postal_code="48226",
    )

    headers = opts.headers("token")

    assert headers["Cache-Control"] == "no-cache"
    assert headers["User-Agent"] == "brave-search-tests/1.0"
    assert headers["X-Loc-Lat"] == "42.331"
    assert headers["X-Loc-Long"] == "-83.046"
    assert headers["X-Loc-Timezone"] == "America/Detroit"
    assert headers["X-Loc-City"] == "Detroit"
    assert headers["X-Loc-State"] == "MI"
    assert headers["X-Loc-State-Name"] == "Michigan"
    assert headers["X-Loc-Country"] == "US"
    assert headers["X-Loc-Postal-Code"] == "48226"


def test_timezone_name_may_be_given_as_string() -> None:
    assert SearchOptions(loc_timezone="Europe/Berlin").headers("t")["X-Loc-Timezone"] == (
        "Europe/Berlin"
    )
