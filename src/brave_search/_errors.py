"""Helpers that turn decoded error documents and transport failures into errors.

Errors carry structured metadata (status, query, retry-after) so callers can
branch on it without brittle substring matching.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from brave_search.errors import APIError, RateLimitError, TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from brave_search.envelope import ErrorEnvelope

_STATUS_HINTS = {
    401: "Check credentials (set BRAVE_API_KEY or pass Config(api_key=...)).",
    403: "Check that the subscription plan covers this endpoint.",
    422: "A request parameter was rejected; the details name the offending parameter.",
    429: "Rate limit exceeded; wait and retry, or upgrade the subscription plan.",
}


def _parse_seconds(raw: Any) -> float | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    # X-RateLimit-Reset lists one value per window; the first is the shortest.
    first = raw.split(",", 1)[0].strip()
    try:
        seconds = float(first)
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def extract_retry_after_s(headers: Mapping[str, str] | None) -> float | None:
    """Read a retry delay from ``Retry-After`` or ``X-RateLimit-Reset``."""
    if headers is None:
        return None
    for name in ("Retry-After", "X-RateLimit-Reset"):
        seconds = _parse_seconds(headers.get(name))
        if seconds is not None:
            return seconds
    return None


def api_error_from_envelope(
    envelope: ErrorEnvelope,
    *,
    status_code: int | None = None,
    query: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> APIError:
    """Build the exception raised for a decoded error document."""
    status = status_code if status_code is not None else envelope.status
    err_cls: type[APIError] = RateLimitError if status == 429 else APIError
    message = f"{envelope} (query: {query})" if query else str(envelope)
    return err_cls(
        message,
        hint=_STATUS_HINTS.get(status),
        envelope=envelope,
        status_code=status,
        query=query,
        retry_after_s=extract_retry_after_s(headers),
    )


def wrap_transport_error(
    exc: httpx.RequestError, *, endpoint: str, query: str | None = None
) -> TransportError:
    """Map an httpx transport failure into ``TransportError``."""
    cause = str(exc) or type(exc).__name__
    return TransportError(
        f"{endpoint} request failed: {cause}",
        hint="Check network connectivity and Config.base_url.",
        query=query,
    )
