from __future__ import annotations

import httpx
import pytest

from brave_search._errors import (
    api_error_from_envelope,
    extract_retry_after_s,
    wrap_transport_error,
)
from brave_search.envelope import ErrorEnvelope
from brave_search.errors import (
    APIError,
    BraveError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    TransportError,
)

pytestmark = pytest.mark.unit


def test_api_error_structured_metadata() -> None:
    envelope = ErrorEnvelope(id="abc", status=422, code="VALIDATION")
    err = APIError(
        "boom",
        hint="do this",
        envelope=envelope,
        status_code=422,
        query="q=test",
        retry_after_s=2.0,
    )

    assert str(err) == "boom"
    assert err.hint == "do this"
    assert err.envelope is envelope
    assert err.status_code == 422
    assert err.query == "q=test"
    assert err.retry_after_s == 2.0


def test_api_error_defaults_to_none() -> None:
    err = APIError("fail")
    assert err.hint is None
    assert err.envelope is None
    assert err.status_code is None
    assert err.query is None
    assert err.retry_after_s is None


def test_subclass_hierarchy() -> None:
    """Every error is catchable as BraveError; API-side ones as APIError."""
    assert issubclass(RateLimitError, APIError)
    assert issubclass(TransportError, APIError)
    assert issubclass(APIError, BraveError)
    assert issubclass(ConfigurationError, BraveError)
    assert issubclass(DecodeError, BraveError)


def test_decode_error_is_a_value_error() -> None:
    """Pydantic reports ValueError subclasses raised in validators as failures."""
    assert isinstance(DecodeError("bad"), ValueError)


def test_envelope_error_message_appends_query() -> None:
    envelope = ErrorEnvelope(id="x", status=401, code="UNAUTHORIZED", detail="nope")

    err = api_error_from_envelope(envelope, status_code=401, query="q=brave")

    assert type(err) is APIError
    assert str(err) == f"{envelope} (query: q=brave)"
    assert err.hint is not None and "BRAVE_API_KEY" in err.hint


def test_envelope_error_message_without_query_is_the_envelope_text() -> None:
    envelope = ErrorEnvelope(detail="nope", status=500)

    err = api_error_from_envelope(envelope)

    assert str(err) == str(envelope)
    assert err.status_code == 500
    assert err.hint is None


def test_status_429_maps_to_rate_limit_error() -> None:
    err = api_error_from_envelope(
        ErrorEnvelope(status=429), status_code=429, headers={"Retry-After": "3"}
    )

    assert isinstance(err, RateLimitError)
    assert err.retry_after_s == 3.0


@pytest.mark.parametrize(
    ("headers", "expected"),
    [
        (None, None),
        ({}, None),
        ({"Retry-After": "7"}, 7.0),
        ({"X-RateLimit-Reset": "1, 1419704"}, 1.0),
        ({"Retry-After": "soon", "X-RateLimit-Reset": "4"}, 4.0),
        ({"Retry-After": "-1"}, None),
    ],
)
def test_extract_retry_after_s(headers, expected) -> None:
    assert extract_retry_after_s(headers) == expected


def test_transport_errors_are_wrapped_with_endpoint_and_query() -> None:
    cause = httpx.ConnectError("connection refused")

    err = wrap_transport_error(cause, endpoint="web/search", query="q=x")

    assert isinstance(err, TransportError)
    assert "web/search" in str(err)
    assert "connection refused" in str(err)
    assert err.query == "q=x"
    assert err.hint is not None
