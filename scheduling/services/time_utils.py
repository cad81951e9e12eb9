"""
time_utils.py
-------------
Helpers for turning request parameters into timezone-aware instants and
for converting stored UTC instants into the display timezone.

Strategy:
- Everything is stored and compared in UTC (settings.USE_TZ = True).
- Naive input is interpreted in Django's current timezone.
- Local presentation uses zoneinfo with SCHEDULER["DISPLAY_TIME_ZONE"];
  no hand-written offset arithmetic.
"""

from datetime import datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from ..conf import scheduler_setting
from .intervals import Interval


def _make_aware(dt_naive: datetime):
    """
    Convert a naive datetime to an aware one using Django's current timezone.
    """
    if timezone.is_aware(dt_naive):
        return dt_naive
    return timezone.make_aware(dt_naive, timezone.get_current_timezone())


def parse_instant(value: str):
    """
    Parse an ISO-8601 datetime string into an aware datetime.
    Returns None when the value is missing or invalid, including instants
    that cannot be represented in UTC.
    """
    value = (value or "").strip()
    if not value:
        return None

    # An unencoded '+' in a query string arrives as a space ("...T10:00:00 10:00").
    if "T" in value and " " in value:
        value = value.replace(" ", "+")

    try:
        parsed = parse_datetime(value)
    except ValueError:
        # Well-formed but impossible values, e.g. month 13
        return None
    if parsed is None:
        return None
    parsed = _make_aware(parsed)
    try:
        # Values near datetime.min/max can parse yet fall outside the UTC range.
        parsed.astimezone(dt_timezone.utc)
    except OverflowError:
        return None
    return parsed


def parse_window(start_raw: str, end_raw: str) -> Interval:
    """
    Build a query window from two raw parameters.

    Raises:
        ValueError: if either value is missing or malformed.
        InvalidWindow: if start >= end.
    """
    if not (start_raw or "").strip() or not (end_raw or "").strip():
        raise ValueError("Both 'start' and 'end' are required.")

    start = parse_instant(start_raw)
    end = parse_instant(end_raw)
    if start is None or end is None:
        raise ValueError("Invalid start or end time. Use ISO-8601, e.g. 2025-01-31T09:00:00Z.")
    return Interval.window(start, end)


def display_timezone() -> ZoneInfo:
    return ZoneInfo(scheduler_setting("DISPLAY_TIME_ZONE"))


def month_range(year: int, month: int, tz=None):
    """
    Return the aware [first day 00:00, first day of next month 00:00) window
    for a month in 'tz' (display timezone by default).
    """
    tz = tz or display_timezone()
    start = datetime(year, month, 1, tzinfo=tz)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=tz)
    else:
        end = datetime(year, month + 1, 1, tzinfo=tz)
    return start, end
