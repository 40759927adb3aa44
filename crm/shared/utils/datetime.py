"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
Calendar boundaries (month/week starts) used by the dashboard live here too.
"""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12

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

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def start_of_month(dt: datetime, months_back: int = 0) -> datetime:
    """
    Return midnight on the first day of the month containing dt, shifted back
    by months_back whole months. Keeps dt's tzinfo.
    """
    month_index = dt.year * 12 + (dt.month - 1) - months_back
    year, month = divmod(month_index, 12)
    return dt.replace(
        year=year, month=month + 1, day=1, hour=0, minute=0, second=0, microsecond=0
    )


def start_of_week(dt: datetime) -> datetime:
    """Return midnight on the Sunday starting the week that contains dt."""
    # weekday(): Monday=0 .. Sunday=6; shift so Sunday=0
    days_since_sunday = (dt.weekday() + 1) % 7
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=days_since_sunday)


def format_short_date(dt: datetime) -> str:
    """Format as M/D/YYYY without zero padding (e.g. 1/3/2025)."""
    return f"{dt.month}/{dt.day}/{dt.year}"
