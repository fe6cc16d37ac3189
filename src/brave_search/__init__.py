"""brave_search: typed, failure-tolerant client for the Brave Search API.

Public API:
    - Brave: async client with one method per search endpoint
    - SearchOptions: optional query parameters and location headers
    - Config: configuration dataclass
    - decode_response(): bytes + status -> typed result or APIError
"""

from __future__ import annotations

import logging

from brave_search.client import Brave
from brave_search.config import Config
from brave_search.envelope import (
    ErrorEnvelope,
    ErrorMeta,
    ErrorMetaError,
    decode_error,
    decode_response,
    decode_result,
)
from brave_search.errors import (
    APIError,
    BraveError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    TransportError,
)
from brave_search.options import (
    Freshness,
    ResultFilter,
    Safesearch,
    SearchOptions,
    UnitType,
)
from brave_search.scalars import (
    Timestamp,
    decode_duration,
    decode_flexible_number,
    decode_timestamp,
    decode_view_count,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("brave-search-client")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("brave_search").addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "Brave",
    "BraveError",
    "Config",
    "ConfigurationError",
    "DecodeError",
    "ErrorEnvelope",
    "ErrorMeta",
    "ErrorMetaError",
    "Freshness",
    "RateLimitError",
    "ResultFilter",
    "Safesearch",
    "SearchOptions",
    "Timestamp",
    "TransportError",
    "UnitType",
    "decode_duration",
    "decode_error",
    "decode_flexible_number",
    "decode_response",
    "decode_result",
    "decode_timestamp",
    "decode_view_count",
]
