"""Small HTTP-related constants shared across brave_search.

This module is intentionally tiny to avoid circular imports and drift.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "https://api.search.brave.com/res/v1/"

WEB_SEARCH_PATH = "web/search"
IMAGE_SEARCH_PATH = "images/search"
VIDEO_SEARCH_PATH = "videos/search"
SUGGEST_SEARCH_PATH = "suggest/search"
SPELLCHECK_PATH = "spellcheck/search"
SUMMARIZER_SEARCH_PATH = "summarizer/search"

SUBSCRIPTION_TOKEN_HEADER = "X-Subscription-Token"


def is_success(status_code: int) -> bool:
    """Return True for statuses in the 2xx range."""
    return 200 <= status_code < 300
