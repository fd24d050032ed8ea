"""
Scalar cell decoding.

Every composite and array decoder starts from ``scan_to_string``; the helpers
here then turn individual field strings into identifiers and timestamps.
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from .errors import InvalidIdentifier, InvalidType, TimestampParseError

# PostgreSQL timestamp / timestamptz text output (ISO DateStyle).
_TIMESTAMP_RE = re.compile(
    r"^(?P<year>\d{4,})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[ T](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?:(?P<sign>[+-])(?P<off_h>\d{2})(?::?(?P<off_m>\d{2}))?(?::?(?P<off_s>\d{2}))?)?"
    r"(?P<bc> BC)?$"
)

_ZERO_TIME = datetime(1, 1, 1)


def scan_to_string(src: Any) -> str:
    """Return the string form of a text or bytes cell; anything else is InvalidType."""
    if isinstance(src, str):
        return src
    if isinstance(src, (bytes, bytearray, memoryview)):
        try:
            return bytes(src).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidType(f"invalid bytes cell, not UTF-8 text: {exc.reason} at byte {exc.start}") from exc
    raise InvalidType(f"invalid type {type(src).__name__}, expected text or bytes")


def parse_identifier(
    value: str, error_cls: type[InvalidIdentifier] = InvalidIdentifier, field: str = "id"
) -> uuid.UUID:
    """Parse a UUID field. Empty and malformed values raise ``error_cls``."""
    if not value:
        raise error_cls(f"invalid {field}: empty value")
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise error_cls(f"invalid {field}: {value!r}") from exc


def parse_timestamp(value: str, tz: tzinfo = timezone.utc) -> datetime:
    """
    Parse PostgreSQL timestamp text into an aware datetime.

    Values carrying an offset keep it; values without one are placed in ``tz``.
    """
    m = _TIMESTAMP_RE.match(value)
    if not m:
        raise TimestampParseError(f"invalid timestamp {value!r}")
    if m["bc"]:
        raise TimestampParseError(f"BC timestamps are not supported: {value!r}")

    fraction = (m["fraction"] or "").ljust(6, "0")[:6]
    try:
        naive = datetime(
            int(m["year"]),
            int(m["month"]),
            int(m["day"]),
            int(m["hour"]),
            int(m["minute"]),
            int(m["second"]),
            int(fraction),
        )
    except ValueError as exc:
        raise TimestampParseError(f"invalid timestamp {value!r}: {exc}") from exc

    if m["sign"] is None:
        return ensure_utc_representable(naive.replace(tzinfo=tz), value)

    offset = timedelta(
        hours=int(m["off_h"]),
        minutes=int(m["off_m"] or 0),
        seconds=int(m["off_s"] or 0),
    )
    if m["sign"] == "-":
        offset = -offset
    try:
        aware = naive.replace(tzinfo=timezone(offset))
    except ValueError as exc:
        raise TimestampParseError(f"invalid timestamp offset {value!r}") from exc
    return ensure_utc_representable(aware, value)


def ensure_utc_representable(value: datetime, source: object = None) -> datetime:
    """
    Return ``value`` if its UTC instant lies within 0001-01-01 .. 9999-12-31.

    Encoding always converts to UTC, so instants at the edges of the calendar
    whose offset pushes them outside that range are refused here.
    """
    try:
        value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise TimestampParseError(
            f"timestamp {source if source is not None else value!r} is out of range in UTC"
        ) from exc
    return value


def is_zero_timestamp(value: datetime | None) -> bool:
    """True for an absent timestamp or the zero instant (0001-01-01 00:00:00)."""
    if value is None:
        return True
    return value.replace(tzinfo=None) == _ZERO_TIME


def format_timestamp(value: datetime) -> str:
    """RFC 3339 in UTC with a ``Z`` suffix. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat()
    return text.replace("+00:00", "Z")
