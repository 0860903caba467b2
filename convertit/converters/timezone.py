"""Render a date/time given in one IANA time zone in another.

Input parsers are tried in order and the first success wins:

    1. ISO-8601 (anything starting ``YYYY-MM-DD``), with or without a time,
       offset or ``Z`` suffix.
    2. Clock time ``HH:MM[:SS]`` with an optional ``AM``/``PM`` suffix, on
       today's date in the source zone.
    3. A generic date string (``Jan 15 2024 3:30 PM``), parsed by pandas.
       The relative keywords ``now`` and ``today`` are rejected.

Zone-naive input is interpreted in the source unit's zone. Input carrying
its own offset or ``Z`` keeps that instant and the source zone is not
applied. Output is always ``YYYY-MM-DD HH:MM:SS`` (24-hour) in the target
zone.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd

from ..schema import ErrorMessages
from ..units import TimeZoneName, Unit

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "{:04d}-{:02d}-{:02d} {:02d}:{:02d}:{:02d}"

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")
_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\s*(AM|PM))?$", re.IGNORECASE)

# Relative keywords pandas resolves against the wall clock
_RELATIVE_KEYWORDS = frozenset({"now", "today"})

# Exceptions pandas raises for unparseable or out-of-range date strings
_PARSE_ERRORS = (ValueError, TypeError, OverflowError)


def resolve_zone(unit: Unit) -> Optional[ZoneInfo]:
    """Return the unit's zone, or None when absent or not a known IANA name."""
    if not isinstance(unit.payload, TimeZoneName) or not unit.payload.iana:
        logger.warning("Unit %r has no time zone", unit.id)
        return None
    try:
        return ZoneInfo(unit.payload.iana)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unit %r names unknown zone %r", unit.id, unit.payload.iana)
        return None


def _today(zone: ZoneInfo) -> dt.date:
    return pd.Timestamp.now(tz=zone).date()


def _timestamp(text: str) -> Optional[pd.Timestamp]:
    try:
        ts = pd.Timestamp(text)
    except _PARSE_ERRORS:
        return None
    if pd.isna(ts):
        return None
    return ts


def _parse_iso(text: str, zone: ZoneInfo) -> Optional[pd.Timestamp]:
    if not _ISO_PREFIX.match(text):
        return None
    return _timestamp(text)


def _parse_clock(text: str, zone: ZoneInfo) -> Optional[pd.Timestamp]:
    match = _CLOCK.match(text)
    if match is None:
        return None

    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    meridiem = (match.group(4) or "").upper()
    if meridiem == "PM" and hours < 12:
        hours += 12
    elif meridiem == "AM" and hours == 12:
        hours = 0
    if hours > 23 or minutes > 59 or seconds > 59:
        return None

    today = _today(zone)
    return pd.Timestamp(
        year=today.year,
        month=today.month,
        day=today.day,
        hour=hours,
        minute=minutes,
        second=seconds,
    )


def _parse_generic(text: str, zone: ZoneInfo) -> Optional[pd.Timestamp]:
    if text.lower() in _RELATIVE_KEYWORDS:
        return None
    return _timestamp(text)


def format_timestamp(ts: pd.Timestamp) -> str:
    """Render ``YYYY-MM-DD HH:MM:SS``, zero-padding years below 1000."""
    return OUTPUT_FORMAT.format(
        ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second
    )


PARSERS = (_parse_iso, _parse_clock, _parse_generic)


def parse_datetime(text: str, zone: ZoneInfo) -> Optional[pd.Timestamp]:
    """Parse ``text`` into a zone-aware timestamp.

    Args:
        text (str): Trimmed date/time input.
        zone (ZoneInfo): Zone applied to zone-naive input.

    Returns:
        pandas.Timestamp | None: Aware timestamp, or None if no parser
        accepted the input.

    Note:
        Wall times skipped by a DST transition shift forward; ambiguous wall
        times resolve to standard time.
    """
    for parser in PARSERS:
        ts = parser(text, zone)
        if ts is None:
            continue
        if ts.tzinfo is None:
            try:
                ts = ts.tz_localize(zone, ambiguous=False, nonexistent="shift_forward")
            except _PARSE_ERRORS:
                return None
        return ts
    return None


def timezone_convert(from_unit: Unit, to_unit: Unit, raw: str) -> str:
    """Convert a date/time from the source zone to the target zone.

    Args:
        from_unit (Unit): Source unit carrying a ``TimeZoneName``.
        to_unit (Unit): Target unit carrying a ``TimeZoneName``.
        raw (str): Raw date/time input.

    Returns:
        str: ``YYYY-MM-DD HH:MM:SS`` in the target zone, ``""`` for blank
        input, ``"Error: Invalid timezone"`` or ``"Error: Invalid date/time"``.
    """
    text = raw.strip()
    if not text:
        return ""

    messages = ErrorMessages()
    source, target = resolve_zone(from_unit), resolve_zone(to_unit)
    if source is None or target is None:
        return messages.invalid_timezone

    ts = parse_datetime(text, source)
    if ts is None:
        return messages.invalid_datetime
    try:
        local = ts.tz_convert(target)
    except _PARSE_ERRORS:
        return messages.invalid_datetime
    return format_timestamp(local)
