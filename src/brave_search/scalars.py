"""Format-tolerant decoders for the scalars the API serves inconsistently.

The search API is free to send the same logical field as a number, a quoted
number, a clock string or a free-form phrase. Each scalar kind here owns one
decode routine that inspects the JSON value (``str`` for a quoted token,
``int``/``float`` for a bare one) before choosing a parse path.

Two policies apply:

- Timestamps and flexible numbers are fail-open: unrecognized input resolves
  to the zero value and the enclosing decode carries on.
- Durations and view counts are strict: unparseable input raises
  ``DecodeError`` because a silently zeroed value would corrupt arithmetic
  done on it downstream.

The ``*Field`` aliases attach the decoders to pydantic models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging
import re
from typing import Annotated, Any

import dateparser
from pydantic import PlainValidator

from brave_search.errors import DecodeError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_CLOCK_PART_RE = re.compile(r"[0-9]+")
# First run of one or two digits, wherever it sits in the phrase.
_SHORT_DIGITS_RE = re.compile(r"[0-9]{1,2}")


# --- Timestamp ---


@dataclass(frozen=True)
class Timestamp:
    """A point in time recovered from one of several textual encodings.

    ``value`` is ``None`` for the zero instant, which is what unrecognized
    input decodes to. Resolved instants are timezone-aware.
    """

    value: datetime | None = None

    @property
    def is_zero(self) -> bool:
        """Whether decoding failed to resolve an instant."""
        return self.value is None


TimestampStrategy = Callable[[str, datetime], datetime | None]


def _parse_rfc3339(text: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    # RFC 3339 always carries an offset; zone-less forms belong to the next format.
    if parsed.tzinfo is None:
        return None
    return parsed


def _strptime_utc(fmt: str) -> Callable[[str], datetime | None]:
    def parse(text: str) -> datetime | None:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            return None

    parse.__name__ = f"strptime({fmt})"
    return parse


#: Absolute formats, tried in order; the first match wins.
TIMESTAMP_FORMATS: tuple[tuple[str, Callable[[str], datetime | None]], ...] = (
    ("RFC 3339", _parse_rfc3339),
    ("YYYY-MM-DDThh:mm:ss", _strptime_utc("%Y-%m-%dT%H:%M:%S")),
    ("Month D, YYYY", _strptime_utc("%B %d, %Y")),
)


def parse_absolute(text: str, now: datetime) -> datetime | None:
    """Match ``text`` against ``TIMESTAMP_FORMATS`` in order."""
    del now
    for _name, parse in TIMESTAMP_FORMATS:
        parsed = parse(text)
        if parsed is not None:
            return parsed
    return None


def parse_natural_language(text: str, now: datetime) -> datetime | None:
    """Resolve phrases such as ``"25 minutes ago"`` relative to ``now``."""
    if not text.strip():
        return None
    return dateparser.parse(
        text,
        languages=["en"],
        settings={
            "RELATIVE_BASE": now.astimezone(timezone.utc).replace(tzinfo=None),
            "TIMEZONE": "UTC",
            "TO_TIMEZONE": "UTC",
            "RETURN_AS_TIMEZONE_AWARE": True,
            "PREFER_DATES_FROM": "past",
        },
    )


def parse_seconds_ago(text: str, now: datetime) -> datetime | None:
    """Last resort for phrasings like ``"12 seconds ago"``.

    Applies only when ``text`` mentions "second". The first run of one or two
    digits is the number of seconds to subtract from ``now``; zero means
    ``now`` itself and no digits means no match.
    """
    if "second" not in text:
        return None
    match = _SHORT_DIGITS_RE.search(text)
    if match is None:
        return None
    seconds = int(match.group())
    if seconds == 0:
        return now
    return now - timedelta(seconds=seconds)


#: Fallback chain for quoted timestamps. Order is part of the contract.
TIMESTAMP_STRATEGIES: tuple[TimestampStrategy, ...] = (
    parse_absolute,
    parse_natural_language,
    parse_seconds_ago,
)


def _from_epoch(seconds: float) -> Timestamp:
    try:
        return Timestamp(datetime.fromtimestamp(seconds, tz=timezone.utc))
    except (OverflowError, OSError, ValueError):
        logger.debug("Epoch value %r out of range; using the zero instant", seconds)
        return Timestamp()


def decode_timestamp(
    value: Any,
    *,
    now: datetime | None = None,
    strategies: tuple[TimestampStrategy, ...] = TIMESTAMP_STRATEGIES,
) -> Timestamp:
    """Decode a JSON value into a ``Timestamp``. Never raises.

    Bare integers are Unix epoch seconds. Strings go through ``strategies``
    in order; the first strategy returning an instant wins. Everything else,
    and strings no strategy recognizes, decode to the zero instant.
    """
    if isinstance(value, Timestamp):
        return value
    if isinstance(value, datetime):
        return Timestamp(value if value.tzinfo else value.replace(tzinfo=timezone.utc))
    if isinstance(value, bool) or value is None:
        return Timestamp()
    if isinstance(value, int):
        return _from_epoch(value)
    if isinstance(value, float):
        if value.is_integer():
            return _from_epoch(value)
        return Timestamp()
    if not isinstance(value, str):
        logger.debug("Unsupported timestamp value %r; using the zero instant", value)
        return Timestamp()

    current = now if now is not None else datetime.now(timezone.utc)
    for strategy in strategies:
        try:
            resolved = strategy(value, current)
        except Exception:
            logger.debug(
                "Timestamp strategy %s failed on %r",
                getattr(strategy, "__name__", strategy),
                value,
                exc_info=True,
            )
            continue
        if resolved is not None:
            return Timestamp(resolved)

    logger.debug("Unrecognized timestamp %r; using the zero instant", value)
    return Timestamp()


# --- Duration ---


def _clock_part(part: str, original: str) -> int:
    if not _CLOCK_PART_RE.fullmatch(part):
        raise DecodeError(f"Invalid duration {original!r}: {part!r} is not a number")
    return int(part)


def decode_duration(value: Any) -> timedelta:
    """Decode a colon-delimited clock string such as ``"59:04"``.

    Missing leading components are zero, so two parts read as
    minutes:seconds. Bare (non-string) values leave the zero duration.
    """
    if isinstance(value, timedelta):
        return value
    if not isinstance(value, str):
        return timedelta(0)

    text = value.strip()
    if not text:
        return timedelta(0)

    parts = text.split(":")
    if len(parts) > 3:
        raise DecodeError(
            f"Invalid duration {value!r}: expected at most 3 components, got {len(parts)}"
        )
    parts = ["00"] * (3 - len(parts)) + parts
    hours, minutes, seconds = (_clock_part(part, value) for part in parts)
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


# --- View count ---


def decode_view_count(value: Any) -> int:
    """Decode a view count sent as ``12``, ``"12"``, ``"12k"`` or ``"3M"``.

    ``k`` appends three zeros and ``m`` six before parsing, so ``"1.2k"`` is
    rejected rather than guessed at.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise DecodeError(f"Invalid view count {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise DecodeError(f"Invalid view count {value!r}")

    text = value.strip().lower()
    if text.endswith("k"):
        text = text[:-1] + "000"
    elif text.endswith("m"):
        text = text[:-1] + "000000"

    if not _INTEGER_RE.fullmatch(text):
        raise DecodeError(f"Invalid view count {value!r}")
    return int(text)


# --- Flexible number ---


def decode_flexible_number(value: Any) -> int:
    """Decode an integer sent either bare or quoted. Never raises; defaults to 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.fullmatch(text):
            return int(text)
    if value is not None:
        logger.debug("Unparseable number %r; using 0", value)
    return 0


# --- Pydantic field types ---


def _nullable(decoder: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def validate(value: Any) -> Any:
        return None if value is None else decoder(value)

    return validate


TimestampField = Annotated[Timestamp | None, PlainValidator(_nullable(decode_timestamp))]
DurationField = Annotated[timedelta | None, PlainValidator(_nullable(decode_duration))]
ViewCountField = Annotated[int, PlainValidator(decode_view_count)]
FlexibleNumberField = Annotated[int, PlainValidator(decode_flexible_number)]
