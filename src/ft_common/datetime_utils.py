"""UTC datetime utilities."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def utc_midnight(day: date) -> datetime:
    """Return the timezone-aware UTC datetime at 00:00 of ``day``."""
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
