from datetime import datetime, timedelta, timezone

import pytest

from core.utils.time import end_of_day, parse_date_param, to_naive_utc, utc_now, utc_now_iso


def test_utc_now_is_naive_with_millisecond_precision() -> None:
    now = utc_now()

    assert now.tzinfo is None
    assert now.microsecond % 1000 == 0


def test_utc_now_iso_is_utc() -> None:
    assert utc_now_iso().endswith("+00:00")


def test_to_naive_utc_converts_offsets() -> None:
    aware = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))

    assert to_naive_utc(aware) == datetime(2024, 1, 1, 9, 0)


def test_to_naive_utc_keeps_naive_values() -> None:
    naive = datetime(2024, 1, 1, 12, 0)

    assert to_naive_utc(naive) is naive


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-01-15", datetime(2024, 1, 15)),
        (" 2024-01-15 ", datetime(2024, 1, 15)),
        ("2024-01-15T10:30:00", datetime(2024, 1, 15, 10, 30)),
        ("2024-01-15T10:30:00+02:00", datetime(2024, 1, 15, 8, 30)),
    ],
)
def test_parse_date_param(value, expected) -> None:
    assert parse_date_param(value) == expected


@pytest.mark.parametrize("value", ["15/01/2024", "2024-13-01", "soon"])
def test_parse_date_param_rejects_malformed(value) -> None:
    with pytest.raises(ValueError, match="Invalid date format"):
        parse_date_param(value)


def test_end_of_day() -> None:
    assert end_of_day(datetime(2024, 1, 15, 8, 0)) == datetime(2024, 1, 15, 23, 59, 59, 999000)
