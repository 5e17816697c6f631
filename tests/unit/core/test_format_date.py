from datetime import datetime

import pytest
from pydantic import ValidationError

from core.config import get_settings
from core.services.date_utils import format_date, resolve_format_spec

AFTERNOON = datetime(2024, 3, 15, 13, 5, 30)


def test_date_only_by_default():
    assert format_date(datetime(2024, 3, 15), date_format="DD/MM/YYYY") == "15/03/2024"
    assert format_date(AFTERNOON) == "15/03/2024"


def test_include_hour_24h():
    assert format_date(AFTERNOON, include_hour=True, use_24_hours=True) == "15/03/2024 13:05"


def test_include_hour_12h():
    assert format_date(AFTERNOON, include_hour=True) == "15/03/2024 01:05 pm"
    assert format_date(AFTERNOON, include_hour=True, use_24_hours=False) == "15/03/2024 01:05 pm"


@pytest.mark.parametrize(
    "hour, minute, expected",
    [(0, 7, "12:07 am"), (11, 59, "11:59 am"), (12, 0, "12:00 pm"), (23, 1, "11:01 pm")],
)
def test_twelve_hour_clock_edges(hour, minute, expected):
    assert format_date(datetime(2024, 3, 15, hour, minute), only_hour=True) == expected


def test_explicit_hour_format_implies_include_hour():
    assert format_date(AFTERNOON, hour_format="hh:mm:ss") == "15/03/2024 01:05:30"
    assert format_date(AFTERNOON, hour_format="HH:mm:ss a", use_24_hours=True) == "15/03/2024 13:05:30"


def test_only_hour_skips_date_and_separator():
    assert format_date(AFTERNOON, only_hour=True) == "01:05 pm"
    assert format_date(AFTERNOON, only_hour=True, separator=" - ") == "01:05 pm"


def test_only_hour_with_include_hour_disabled_is_empty():
    assert format_date(AFTERNOON, only_hour=True, include_hour=False) == ""


def test_custom_separator():
    assert format_date(AFTERNOON, include_hour=True, separator=" - ") == "15/03/2024 - 01:05 pm"
    assert format_date(AFTERNOON, include_hour=True, separator="") == "15/03/202401:05 pm"


def test_templates_are_case_insensitive():
    assert format_date(AFTERNOON, date_format="YYYY/MM/DD") == "2024/03/15"
    assert format_date(AFTERNOON, date_format="yyyy-mm-dd") == "2024-03-15"


def test_each_token_is_replaced_once():
    assert format_date(AFTERNOON, date_format="dd dd") == "15 dd"


def test_empty_date_format_falls_back_to_default():
    assert format_date(AFTERNOON, date_format="  ") == "15/03/2024"


def test_string_and_omitted_dates(frozen_now):
    assert format_date("2024-03-15") == "15/03/2024"
    assert format_date() == "15/03/2024"
    assert format_date("") == "15/03/2024"
    assert format_date(None, only_hour=True, use_24_hours=True) == "13:05"


def test_invalid_date_renders_nan():
    assert format_date("not-a-date") == "NaN/NaN/NaN"
    assert format_date("not-a-date", include_hour=True) == "NaN/NaN/NaN NaN:NaN am"
    assert format_date("not-a-date", include_hour=True, use_24_hours=True) == "NaN/NaN/NaN NaN:NaN"


def test_settings_provide_defaults(monkeypatch):
    monkeypatch.setenv("DATE_UTILS_SEPARATOR", " | ")
    monkeypatch.setenv("DATE_UTILS_USE_24_HOURS", "true")
    monkeypatch.setenv("DATE_UTILS_DATE_FORMAT", "YYYY-MM-DD")
    get_settings.cache_clear()

    assert format_date(AFTERNOON, include_hour=True) == "2024-03-15 | 13:05"
    # explicit arguments win over settings
    assert format_date(AFTERNOON, include_hour=True, use_24_hours=False, separator=" ") == "2024-03-15 01:05 pm"


def test_malformed_settings_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("DATE_UTILS_USE_24_HOURS", "maybe")
    get_settings.cache_clear()
    with pytest.raises(ValidationError):
        get_settings()

    assert format_date(AFTERNOON, include_hour=True) == "15/03/2024 01:05 pm"
    assert format_date(AFTERNOON, include_hour=True, use_24_hours=True) == "15/03/2024 13:05"


def test_resolved_spec_is_frozen():
    spec = resolve_format_spec(hour_format="hh:mm")
    assert spec.include_hour is True
    assert spec.only_hour is False
    assert spec.separator == " "
    with pytest.raises(ValidationError):
        spec.separator = " - "  # type: ignore[misc]
