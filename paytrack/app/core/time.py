"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def utc_today() -> date:
    """Return the current UTC calendar date used for status comparisons."""
    return utc_now().date()


def as_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar date; dates pass through unchanged."""
    if isinstance(value, datetime):
        return value.date()
    return value
