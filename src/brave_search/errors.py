"""Exception hierarchy for brave_search."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brave_search.envelope import ErrorEnvelope


class BraveError(Exception):
    """Base exception for all brave_search errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(BraveError):
    """Configuration or search option validation failed."""


class DecodeError(BraveError, ValueError):
    """A response could not be decoded structurally.

    Raised for payloads that are not JSON at all and for strict scalars
    (durations, view counts) that cannot be parsed from well-formed JSON.
    Subclassing ``ValueError`` lets pydantic validators report it as a
    regular validation failure.
    """


class APIError(BraveError):
    """The API answered with a structured error payload.

    ``envelope`` holds the decoded error document; ``query`` is the query
    string of the request that failed, when the caller knows it.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        envelope: ErrorEnvelope | None = None,
        status_code: int | None = None,
        query: str | None = None,
        retry_after_s: float | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.envelope = envelope
        self.status_code = status_code
        self.query = query
        self.retry_after_s = retry_after_s


class RateLimitError(APIError):
    """Rate limit exceeded (HTTP 429)."""


class TransportError(APIError):
    """The request failed before any response was received."""
