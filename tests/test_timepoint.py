import calendar
from datetime import datetime, timedelta, timezone

import pytest

from purplekit.timepoint import days_in_month, is_leap_year, now, timepoint_string


def test_timepoint_string_formats_utc():
    tp = datetime(2025, 7, 26, 10, 0, 0, tzinfo=timezone.utc)
    assert timepoint_string(tp) == "2025-07-26 10:00:00 UTC"


def test_naive_datetime_treated_as_utc():
    naive = datetime(2025, 7, 26, 10, 0, 0)
    aware = naive.replace(tzinfo=timezone.utc)
    assert timepoint_string(naive) == timepoint_string(aware)


def test_other_timezone_converted_to_utc():
    plus_two = timezone(timedelta(hours=2))
    local = datetime(2025, 7, 26, 12, 30, 5, tzinfo=plus_two)
    utc = datetime(2025, 7, 26, 10, 30, 5, tzinfo=timezone.utc)
    assert timepoint_string(local) == timepoint_string(utc)


def test_fractional_seconds_are_dropped():
    base = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert timepoint_string(base.replace(microsecond=999999)) == timepoint_string(base)


def test_now_is_utc_and_current():
    before = datetime.now(timezone.utc)
    value = now()
    after = datetime.now(timezone.utc)
    assert value.utcoffset() == timedelta(0)
    assert before <= value <= after


@pytest.mark.parametrize("year", list(range(1890, 2110)))
def test_is_leap_year_matches_calendar(year):
    assert is_leap_year(year) == calendar.isleap(year)


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
@pytest.mark.parametrize("month", list(range(1, 13)))
def test_days_in_month_matches_calendar(year, month):
    assert days_in_month(year, month) == calendar.monthrange(year, month)[1]


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(2024, month)