from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from dateutil import tz

from wallclock.errors import TimezoneError
from wallclock.timezones import load_location


def test_empty_name_means_no_override():
    assert load_location("") is None


def test_local_is_system_zone():
    assert isinstance(load_location("Local"), tz.tzlocal)


@pytest.mark.parametrize(
    "name, offset",
    [
        ("UTC", timedelta(0)),
        ("Asia/Tokyo", timedelta(hours=9)),
        ("America/New_York", timedelta(hours=-4)),
        ("Asia/Kolkata", timedelta(hours=5, minutes=30)),
    ],
)
def test_iana_names_resolve(name, offset):
    loc = load_location(name)
    summer = datetime(2025, 6, 5, 12, 0, tzinfo=timezone.utc).astimezone(loc)
    assert summer.utcoffset() == offset


@pytest.mark.parametrize("name", ["Not/AZone", "Mars/Olympus_Mons", "../etc/passwd"])
def test_invalid_names_fail(name):
    with pytest.raises(TimezoneError) as info:
        load_location(name)
    assert str(info.value).startswith("invalid timezone:")
    assert info.value.name == name
    assert info.value.__cause__ is not None
