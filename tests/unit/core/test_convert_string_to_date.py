from datetime import datetime

import pytest

from core.services.date_utils import convert_string_to_date, format_date


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15/03/2024 - 1:05 PM", datetime(2024, 3, 15, 13, 5)),
        ("15/03/2024 - 01:05 PM", datetime(2024, 3, 15, 13, 5)),
        ("15/03/2024 - 12:30 AM", datetime(2024, 3, 15, 0, 30)),
        ("15/03/2024 - 12:30 PM", datetime(2024, 3, 15, 12, 30)),
        ("01/01/2025 - 9:00 am", datetime(2025, 1, 1, 9, 0)),
    ],
)
def test_strict_pattern(text, expected):
    assert convert_string_to_date(text) == expected


def test_out_of_range_fields_roll_over():
    assert convert_string_to_date("31/02/2024 - 10:00 AM") == datetime(2024, 3, 2, 10, 0)
    assert convert_string_to_date("15/13/2024 - 10:00 AM") == datetime(2025, 1, 15, 10, 0)
    assert convert_string_to_date("00/03/2024 - 10:00 AM") == datetime(2024, 2, 29, 10, 0)
    assert convert_string_to_date("15/03/2024 - 13:00 PM") == datetime(2024, 3, 16, 1, 0)


def test_rollover_past_the_last_year_is_none():
    assert convert_string_to_date("01/13/9999 - 10:00 AM") is None


def test_partial_dates_start_at_the_beginning_of_the_period(frozen_now):
    assert convert_string_to_date("2024-03") == datetime(2024, 3, 1)
    assert convert_string_to_date("2024") == datetime(2024, 1, 1)


def test_falls_back_to_general_parsing():
    assert convert_string_to_date("2024-03-15T08:00:00") == datetime(2024, 3, 15, 8, 0)
    assert convert_string_to_date("March 15, 2024") == datetime(2024, 3, 15)


@pytest.mark.parametrize("value", ["garbage", "", None, 123])
def test_unparseable_returns_none(value):
    assert convert_string_to_date(value) is None


def test_layout_arguments_are_ignored():
    text = "15/03/2024 - 1:05 PM"
    assert convert_string_to_date(text, include_hour=False, separator="|") == convert_string_to_date(text)


@pytest.mark.parametrize(
    "instant",
    [
        datetime(2024, 3, 15, 13, 5, 42),
        datetime(2024, 12, 31, 0, 0, 1),
        datetime(2023, 7, 4, 12, 59),
    ],
)
def test_round_trip_with_formatted_string(instant):
    rendered = format_date(
        instant,
        date_format="DD/MM/YYYY",
        include_hour=True,
        hour_format="hh:mm a",
        separator=" - ",
    )
    assert convert_string_to_date(rendered) == instant.replace(second=0, microsecond=0)
