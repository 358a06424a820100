"""Timestamp normalization (core domain).

Exports mix several timestamp encodings. Each parser strategy below returns
an aware datetime or None, and the first strategy that recognizes the input
wins. Anything no strategy understands is shown verbatim and bucketed under
the "unknown" partition.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional, Sequence, Tuple

from core.models import UNKNOWN_PARTITION, NormalizedTimestamp

# Dates are padded by hand: strftime("%Y") drops leading zeros before 1000 on glibc.
TIME_FORMAT = "%H:%M:%S %Z"

ParserStrategy = Callable[[str], Optional[datetime]]

_ZONED_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S.%f%z",
)
_NAIVE_ISO_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
)
_SQLITE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
)
_DATE_ONLY_FORMATS = ("%Y-%m-%d",)


def _try_formats(value: str, formats: Sequence[str]) -> Optional[datetime]:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_zoned(value: str) -> Optional[datetime]:
    """RFC 3339 style input with an explicit zone ("Z" or "+HH:MM")."""

    return _try_formats(value, _ZONED_FORMATS)


def _assume_utc(formats: Sequence[str]) -> ParserStrategy:
    def strategy(value: str) -> Optional[datetime]:
        parsed = _try_formats(value, formats)
        if parsed is None:
            return None
        return parsed.replace(tzinfo=timezone.utc)

    return strategy


parse_naive_iso = _assume_utc(_NAIVE_ISO_FORMATS)
parse_sqlite_datetime = _assume_utc(_SQLITE_FORMATS)
parse_date_only = _assume_utc(_DATE_ONLY_FORMATS)

# Order matters: zoned input must not be read as naive UTC.
PARSER_STRATEGIES: Tuple[ParserStrategy, ...] = (
    parse_zoned,
    parse_naive_iso,
    parse_sqlite_datetime,
    parse_date_only,
)


def _format_month(value: datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def parse_timestamp(raw: str) -> Optional[datetime]:
    """Return an aware datetime for ``raw`` or None if no strategy matches."""

    value = raw.strip()
    if not value:
        return None
    for strategy in PARSER_STRATEGIES:
        parsed = strategy(value)
        if parsed is not None:
            return parsed
    return None


def normalize_timestamp(raw: str, tz: Optional[tzinfo] = None) -> NormalizedTimestamp:
    """Normalize a raw timestamp for display and partitioning.

    Parsed values are converted to ``tz`` (the system local zone when None)
    and the partition key is taken from that local calendar date, so a
    message sent late on the last day of a month in UTC may land in the next
    month locally. Empty input yields an empty display string; unparseable
    input is displayed as-is. Both fall into the "unknown" partition.
    """

    if not raw or not raw.strip():
        return NormalizedTimestamp(display="", partition=UNKNOWN_PARTITION)

    parsed = parse_timestamp(raw)
    if parsed is None:
        return NormalizedTimestamp(display=raw, partition=UNKNOWN_PARTITION)

    try:
        local = parsed.astimezone(tz)
        display = f"{_format_month(local)}-{local.day:02d} {local.strftime(TIME_FORMAT)}".strip()
    except (OverflowError, ValueError, OSError):
        # Shifting zones can push dates near year 1 or 9999 out of range.
        return NormalizedTimestamp(display=raw, partition=UNKNOWN_PARTITION)

    return NormalizedTimestamp(display=display, partition=_format_month(local), instant=local)


def partition_key(raw: str, tz: Optional[tzinfo] = None) -> str:
    """Return only the ``YYYY-MM`` bucket (or "unknown") for ``raw``."""

    return normalize_timestamp(raw, tz).partition
