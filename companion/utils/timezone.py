"""Timezone utilities for stored UTC timestamps"""
from datetime import date, datetime
import pytz


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the way timestamps are stored."""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def to_display_tz(dt: datetime | None, tz_name: str = "UTC") -> datetime | None:
    """
    Convert a naive UTC datetime to the display timezone.

    Args:
        dt: Naive datetime assumed to be in UTC, or None
        tz_name: IANA timezone name (e.g. 'Europe/Paris')

    Returns:
        Naive datetime in the display timezone, or None if input is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.timezone(tz_name)).replace(tzinfo=None)


def local_date(dt: datetime, tz_name: str = "UTC") -> date:
    """Calendar day of a stored UTC timestamp in the display timezone."""
    return to_display_tz(dt, tz_name).date()


def local_today(tz_name: str = "UTC") -> date:
    return local_date(utcnow(), tz_name)
