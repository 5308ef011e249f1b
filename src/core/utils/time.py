"""
Time-related utilities for the application.

MongoDB stores datetimes as UTC milliseconds and pymongo hands them back
as naive values, so every datetime that reaches the store or a filter is
normalized to naive UTC here.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as a naive datetime with millisecond precision.

    Example:
        datetime(2024, 1, 15, 10, 42, 31, 123000)
    """
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return datetime.now(timezone.utc).isoformat()


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_date_param(value: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` date or an ISO-8601 datetime query value.

    Raises:
        ValueError: If the value is neither
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValueError(
            f"Invalid date format. Expected YYYY-MM-DD, got '{value}'"
        ) from exc

    return to_naive_utc(parsed)


def end_of_day(value: datetime) -> datetime:
    """Move a datetime to the last millisecond of its day (23:59:59.999)."""
    return value.replace(hour=23, minute=59, second=59, microsecond=999000)
