"""UTC helpers and calendar boundaries."""

from datetime import UTC, datetime, timedelta, timezone

from crm.shared.utils.datetime import (
    ensure_utc,
    format_short_date,
    start_of_month,
    start_of_week,
    utc_now,
)


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is UTC


def test_ensure_utc() -> None:
    assert ensure_utc(None) is None
    naive = datetime(2025, 1, 1, 8, 0)
    assert ensure_utc(naive) == datetime(2025, 1, 1, 8, 0, tzinfo=UTC)
    plus_two = datetime(2025, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))
    converted = ensure_utc(plus_two)
    assert converted.tzinfo is UTC
    assert converted.hour == 8


def test_start_of_month() -> None:
    dt = datetime(2025, 3, 15, 12, 30, 45, tzinfo=UTC)
    assert start_of_month(dt) == datetime(2025, 3, 1, tzinfo=UTC)
    assert start_of_month(dt, months_back=1) == datetime(2025, 2, 1, tzinfo=UTC)
    assert start_of_month(dt, months_back=11) == datetime(2024, 4, 1, tzinfo=UTC)


def test_start_of_month_crosses_year() -> None:
    dt = datetime(2025, 1, 20, tzinfo=UTC)
    assert start_of_month(dt, months_back=1) == datetime(2024, 12, 1, tzinfo=UTC)
    assert start_of_month(dt, months_back=13) == datetime(2023, 12, 1, tzinfo=UTC)


def test_start_of_week_is_sunday() -> None:
    sunday = datetime(2025, 3, 9, 15, 0, tzinfo=UTC)
    assert start_of_week(sunday) == datetime(2025, 3, 9, tzinfo=UTC)
    monday = datetime(2025, 3, 10, 1, 0, tzinfo=UTC)
    assert start_of_week(monday) == datetime(2025, 3, 9, tzinfo=UTC)
    saturday = datetime(2025, 3, 15, 23, 59, tzinfo=UTC)
    assert start_of_week(saturday) == datetime(2025, 3, 9, tzinfo=UTC)


def test_format_short_date_has_no_padding() -> None:
    assert format_short_date(datetime(2025, 1, 3, tzinfo=UTC)) == "1/3/2025"
    assert format_short_date(datetime(2024, 12, 25, tzinfo=UTC)) == "12/25/2024"
