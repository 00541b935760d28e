from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from wallclock.layout import compile_layout, format_time

# The reference instant itself, in a -07:00 zone named MST.
MST = timezone(timedelta(hours=-7), "MST")
REF = datetime(2006, 1, 2, 15, 4, 5, 123456, tzinfo=MST)


@pytest.mark.parametrize(
    "layout, expected",
    [
        ("15:04", "15:04"),
        ("Monday, January 2", "Monday, January 2"),
        ("Mon Jan _2 15:04:05 MST 2006", "Mon Jan  2 15:04:05 MST 2006"),
        ("2006-01-02T15:04:05Z07:00", "2006-01-02T15:04:05-07:00"),
        ("3:04PM", "3:04PM"),
        ("03:04 pm", "03:04 pm"),
        ("06 002 __2", "06 002   2"),
        ("-0700 -07 -070000 -07:00:00", "-0700 -07 -070000 -07:00:00"),
        ("15:04:05.000", "15:04:05.123"),
        ("15:04:05.999999999", "15:04:05.123456"),
        ("15:04:05,000000", "15:04:05,123456"),
        ("1/2 4:5", "1/2 4:5"),
    ],
)
def test_reference_instant_formats_as_itself(layout, expected):
    assert format_time(REF, layout) == expected


def test_fields_substitute():
    dt = datetime(2025, 6, 5, 18, 4, 9, tzinfo=timezone.utc)
    assert format_time(dt, "15:04") == "18:04"
    assert format_time(dt, "Monday, January 2") == "Thursday, June 5"
    assert format_time(dt, "Mon Jan 02 2006") == "Thu Jun 05 2025"
    assert format_time(dt, "3:04 PM") == "6:04 PM"
    assert format_time(dt, "15:04:05 Z07:00") == "18:04:09 Z"


def test_midnight_and_noon_on_twelve_hour_clock():
    midnight = datetime(2025, 1, 1, 0, 30, tzinfo=timezone.utc)
    noon = datetime(2025, 1, 1, 12, 30, tzinfo=timezone.utc)
    assert format_time(midnight, "3:04 PM") == "12:30 AM"
    assert format_time(noon, "03:04 pm") == "12:30 pm"


def test_zone_abbreviation_from_zoneinfo():
    dt = datetime(2025, 1, 15, 12, 0, tzinfo=ZoneInfo("America/New_York"))
    assert format_time(dt, "15:04 MST") == "12:00 EST"


def test_trimmed_fraction_drops_separator_when_zero():
    dt = datetime(2025, 1, 1, 8, 0, 0, tzinfo=timezone.utc)
    assert format_time(dt, "15:04:05.999") == "08:00:00"
    assert format_time(dt, "15:04:05.000") == "08:00:00.000"


def test_lowercase_after_jan_and_mon_is_literal():
    dt = datetime(2025, 6, 5, tzinfo=timezone.utc)
    assert format_time(dt, "Janet Month") == "Janet Month"


def test_underscore_before_year_is_literal():
    dt = datetime(2025, 6, 5, tzinfo=timezone.utc)
    assert format_time(dt, "x_2006") == "x_2025"


def test_unknown_text_passes_through():
    dt = datetime(2025, 6, 5, 18, 4, tzinfo=timezone.utc)
    assert format_time(dt, "Time: 15h04 (local) !") == "Time: 18h04 (local) !"
    assert format_time(dt, "") == ""


def test_percent_sign_is_literal_between_tokens():
    dt = datetime(2025, 6, 5, 18, 4, tzinfo=timezone.utc)
    assert format_time(dt, "15:04 (%)") == "18:04 (%)"
    # digits are still tokens: "1" is the month
    assert format_time(dt, "15:04 (100%)") == "18:04 (600%)"
    assert format_time(dt, "%H:%M") == "%H:%M"


def test_compile_layout_splits_tokens():
    assert compile_layout("15:04") == ((True, "15"), (False, ":"), (True, "04"))
