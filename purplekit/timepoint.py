"""UTC time helpers shared by the cron scheduler."""

from __future__ import annotations

from datetime import datetime, timezone

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _as_utc(tp: datetime) -> datetime:
    if tp.tzinfo is None:
        return tp.replace(tzinfo=timezone.utc)
    return tp.astimezone(timezone.utc)


def timepoint_string(tp: datetime) -> str:
    """Format a time point as ``YYYY-MM-DD HH:MM:SS UTC``.

    Naive datetimes are taken to be in UTC; fractions of a second are dropped.
    """
    return _as_utc(tp).strftime("%Y-%m-%d %H:%M:%S UTC")


def now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]