"""Configuration: frozen Config with the subscription token resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from urllib.parse import urlparse

from dotenv import load_dotenv

from brave_search._http import DEFAULT_BASE_URL
from brave_search.errors import ConfigurationError

load_dotenv()

API_KEY_ENV_VAR = "BRAVE_API_KEY"


@dataclass(frozen=True)
class Config:
    """Immutable client configuration.

    Example:
        config = Config()
        # api_key is resolved from BRAVE_API_KEY
    """

    #: Auto-resolved from ``BRAVE_API_KEY`` when *None*.
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0

    def __post_init__(self) -> None:
        """Auto-resolve the API key and validate configuration."""
        if self.api_key is None:
            object.__setattr__(self, "api_key", os.environ.get(API_KEY_ENV_VAR))

        if not self.api_key:
            raise ConfigurationError(
                "API key required",
                hint=f"Set {API_KEY_ENV_VAR} environment variable or pass api_key=...",
            )

        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This is the per-request timeout in seconds.",
            )

        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"Invalid base_url: {self.base_url!r}",
                hint=f"Use an absolute http(s) URL such as {DEFAULT_BASE_URL!r}.",
            )
        # Endpoint paths are joined relative to the base, which needs a trailing slash.
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(api_key={'[REDACTED]' if self.api_key else None}, "
            f"base_url={self.base_url!r}, timeout_s={self.timeout_s})"
        )

    __repr__ = __str__
