"""Conversions between datetimes and the UTC timestamps used by the service."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_TIMESTAMP_PREFIX = re.compile(
    r"\s*(\d{1,4})-(\d{1,2})-(\d{1,2})T(\d{1,2}):(\d{1,2}):(\d{1,2})"
)
_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


def _as_utc(moment: datetime) -> datetime:
    """Return ``moment`` as an aware UTC datetime; naive values are taken as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_time(moment: datetime, fmt: str, utc: bool) -> str:
    """Format ``moment`` with ``fmt`` in UTC or in the process's local time zone."""
    whole_seconds = _as_utc(moment).replace(microsecond=0)
    shown = whole_seconds if utc else whole_seconds.astimezone()
    return shown.strftime(fmt)


def to_utc_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.ffffffZ``."""
    utc_moment = _as_utc(moment)
    return f"{format_time(utc_moment, '%Y-%m-%dT%H:%M:%S', True)}.{utc_moment.microsecond:06d}Z"


def parse_utc_timestamp(timestamp: str) -> datetime:
    """Parse a UTC timestamp into an aware UTC datetime.

    The date and time of day are read from the start of the string; anything
    after them is ignored except the digits following the first ``.``, which
    are read (at most six characters) as a count of microseconds.
    """
    match = _TIMESTAMP_PREFIX.match(timestamp)
    if match is None:
        raise ValueError(f"Failed to parse timestamp: {timestamp}")
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as exc:
        raise ValueError(f"Failed to parse timestamp: {timestamp}") from exc

    dot = timestamp.find(".")
    if dot != -1:
        fraction = timestamp[dot + 1 : dot + 7]
        digits = _LEADING_INTEGER.match(fraction)
        if digits is None:
            raise ValueError(f"Failed to parse microseconds in timestamp: {timestamp}")
        moment += timedelta(microseconds=int(digits.group()))

    return moment