"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

import calendar
from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def subtract_months(dt: datetime, months: int) -> datetime:
    """
    Return dt moved back by a number of calendar months.

    The day is clamped to the length of the target month, so
    2026-08-31 minus 6 months is 2026-02-28. Time and tzinfo are kept.

    Args:
        dt: Starting datetime
        months: Number of calendar months to go back (>= 0)

    Returns:
        Shifted datetime
    """
    total = dt.year * 12 + (dt.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def month_key(dt: datetime) -> str:
    """Return the UTC calendar month of dt as 'YYYY-MM'."""
    return ensure_utc(dt).strftime("%Y-%m")
