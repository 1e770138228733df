from datetime import date

import pytest
from freezegun import freeze_time

from dates import format_date, normalize_date
from errors import DateError, InvalidDateFormat


@pytest.mark.parametrize("token", ["2024-02-29", "2023-12-31", "2000-01-01", "1999-07-04"])
def test_valid_dates_keep_year_month_day(token):
    parsed = normalize_date(token)
    year, month, day = (int(p) for p in token.split("-"))
    assert (parsed.year, parsed.month, parsed.day) == (year, month, day)
    assert format_date(parsed) == token


@freeze_time("2025-06-15 23:30:00")
def test_today_is_current_local_date():
    assert normalize_date("today") == date(2025, 6, 15)


@pytest.mark.parametrize(
    "token",
    ["2024-02-30", "2024-13-01", "not-a-date", "2023-02-29", "2024-1-05", "Today", "", "2024-01-01T00:00"],
)
def test_invalid_tokens_are_rejected(token):
    with pytest.raises(InvalidDateFormat) as exc_info:
        normalize_date(token)
    assert isinstance(exc_info.value, DateError)
    assert str(exc_info.value).startswith("Invalid date format")


def test_parse_diagnostic_is_kept():
    with pytest.raises(InvalidDateFormat) as exc_info:
        normalize_date("2024-02-30")
    assert "day is out of range" in str(exc_info.value)
