"""Response envelope decoding: success payload or structured API error.

The transport hands over raw bytes plus the HTTP status. A 2xx status means
the bytes are the endpoint's result shape; anything else means they are an
error document. Error documents are decoded in two explicit passes: the
bytes become a generic JSON tree, the ``time`` field is pulled out and
resolved through the fail-open timestamp decoder, and only then is the rest
validated into ``ErrorEnvelope``. A malformed ``time`` therefore never
prevents the error itself from being reported.

Payloads that are not JSON at all raise ``DecodeError`` so callers can tell
"the server returned a well-formed error" from "the server returned garbage".
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from brave_search._errors import api_error_from_envelope
from brave_search._http import is_success
from brave_search.errors import DecodeError
from brave_search.models.common import Shape
from brave_search.scalars import FlexibleNumberField, Timestamp, TimestampField, decode_timestamp

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ShapeT = TypeVar("ShapeT", bound=BaseModel)


class ErrorContext(Shape):
    enum_values: list[str] = Field(default_factory=list)


class ErrorMetaError(Shape):
    """One field-level validation failure."""

    loc: list[str | int] = Field(default_factory=list)
    message: str = Field(default="", alias="msg")
    type: str = ""
    input: Any = None
    context: ErrorContext | None = Field(default=None, alias="ctx")

    @property
    def location(self) -> str:
        """Dotted path of the offending parameter, e.g. ``query.offset``."""
        return ".".join(str(part) for part in self.loc)

    def render(self) -> str:
        return (
            f"(type [{self.type}]; loc [{self.location}]; "
            f"input [{_render_input(self.input)}]; msg [{self.message}])"
        )


class ErrorMeta(Shape):
    component: str = ""
    errors: list[ErrorMetaError] = Field(default_factory=list)


class ErrorEnvelope(Shape):
    """Decoded body of a non-2xx response.

    ``str()`` is part of the public contract: the detail message followed by
    every validation error in array order, rendered identically for
    identical input.
    """

    id: str = ""
    status: FlexibleNumberField = 0
    code: str = ""
    detail: str = ""
    meta: ErrorMeta = Field(default_factory=ErrorMeta)
    time: TimestampField = Field(default_factory=Timestamp)

    def __str__(self) -> str:
        segments = [
            f"error: {self.detail} (ID: {self.id}; Status: {self.status}; Code: {self.code}",
            *(error.render() for error in self.meta.errors),
            "",
        ]
        return "); details: ".join(segments)


def _render_input(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


def _load_json(payload: bytes | str) -> Any:
    try:
        return json.loads(payload)
    except ValueError as e:
        raise DecodeError(
            f"Response is not valid JSON: {e}",
            hint="The server returned a non-JSON body; check the base URL and endpoint.",
        ) from e


def _validate(shape: type[ShapeT], data: Any) -> ShapeT:
    try:
        return shape.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Could not decode {shape.__name__}: {e}") from e


def decode_result(payload: bytes | str, result_type: type[ShapeT]) -> ShapeT:
    """Decode a success payload into ``result_type``."""
    return _validate(result_type, _load_json(payload))


def decode_error(payload: bytes | str) -> ErrorEnvelope:
    """Decode an error payload into an ``ErrorEnvelope``.

    Accepts both the wrapped form (``{"error": {...}, "time": 1700000000}``)
    and a bare error object.
    """
    tree = _load_json(payload)
    if not isinstance(tree, dict):
        raise DecodeError(
            f"Expected a JSON object for an error response, got {type(tree).__name__}"
        )

    inner = tree.get("error")
    if isinstance(inner, dict):
        raw_time = tree.get("time")
        if raw_time is None:
            raw_time = inner.get("time")
    else:
        inner = tree
        raw_time = tree.get("time")

    fields = {key: value for key, value in inner.items() if key != "time"}
    fields["time"] = decode_timestamp(raw_time)
    return _validate(ErrorEnvelope, fields)


def decode_response(
    payload: bytes | str,
    *,
    status_code: int,
    result_type: type[ShapeT],
    query: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> ShapeT:
    """Decode one response, raising ``APIError`` for structured errors.

    Args:
        payload: Raw response body.
        status_code: HTTP status of the response; 2xx selects ``result_type``.
        result_type: Shape to decode a success payload into.
        query: Query string of the originating request, attached to errors.
        headers: Response headers, consulted for retry-after metadata.

    Raises:
        APIError: The payload is a well-formed error document.
        DecodeError: The payload is not JSON or does not fit the shape.
    """
    if is_success(status_code):
        return decode_result(payload, result_type)

    envelope = decode_error(payload)
    logger.debug(
        "API error status=%s code=%s id=%s", status_code, envelope.code, envelope.id
    )
    raise api_error_from_envelope(
        envelope, status_code=status_code, query=query, headers=headers
    )
