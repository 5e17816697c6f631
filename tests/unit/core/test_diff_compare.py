from datetime import date, datetime

import pytest

from core.services.date_utils import compare_dates, diff_days, diff_hours


def test_diff_hours_between_times_of_day():
    assert diff_hours("03:12", "15:30") == pytest.approx(12.3)
    assert diff_hours("15:30", "03:12") == pytest.approx(-12.3)


def test_diff_hours_defaults_end_to_now(frozen_now):
    assert diff_hours(datetime(2024, 3, 15, 10, 5, 30)) == pytest.approx(3.0)


def test_diff_hours_mixed_inputs():
    assert diff_hours("2024-03-15T00:00:00", datetime(2024, 3, 16, 6)) == pytest.approx(30.0)


@pytest.mark.parametrize("start, end", [("bad", "03:12"), ("03:12", "bad"), ("nonsense", "01:00")])
def test_diff_hours_invalid_is_none(start, end):
    assert diff_hours(start, end) is None


def test_diff_days():
    assert diff_days("2024-01-01", "2024-03-01") == 60
    assert diff_days("2024-03-01", "2024-01-01") == 60


def test_diff_days_ignores_time_of_day():
    assert diff_days("2024-03-01T23:59:00", "2024-03-02T00:01:00") == 1
    assert diff_days("2024-03-01T00:00:00", "2024-03-01T23:59:00") == 0


def test_diff_days_partial_dates():
    assert diff_days("2024-03", "2024-03-01") == 0
    assert diff_days("2024", "2024-02-01") == 31


def test_diff_days_defaults_end_to_now(frozen_now):
    assert diff_days(date(2024, 3, 10)) == 5


def test_diff_days_invalid_is_none():
    assert diff_days("not-a-date", "2024-01-01") is None


def test_compare_dates():
    assert compare_dates("2024-01-01", "2024-03-01") == 1
    assert compare_dates("2024-03-01", "2024-01-01") == -1
    assert compare_dates("2024-01-01", "2024-01-01") == 0
    assert compare_dates(date(2024, 1, 1), "2024-01-01T00:00:00") == 0
    assert compare_dates("08:00", "09:30") == 1


def test_compare_dates_is_equal_when_unresolvable():
    assert compare_dates("not-a-date", "2024-01-01") == 0
    assert compare_dates("2024-01-01", "also-not-a-date") == 0
