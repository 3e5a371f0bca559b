"""Tests for TimePoint and timezone handling."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from unidate import InvalidTimezoneError, TimePoint, with_timezone, zone


def test_zone_returns_zoneinfo():
    """Test that known IANA names resolve to ZoneInfo objects."""
    assert zone("America/New_York") == ZoneInfo("America/New_York")
    assert zone("UTC") == ZoneInfo("UTC")


@pytest.mark.parametrize("name", ["Invalid/Timezone", "", "   ", "../etc/passwd"])
def test_zone_rejects_unknown_names(name):
    """Test that unknown or malformed names raise InvalidTimezoneError."""
    with pytest.raises(InvalidTimezoneError):
        zone(name)


def test_invalid_timezone_error_is_value_error():
    """Test that callers catching ValueError also catch timezone errors."""
    with pytest.raises(ValueError, match="Unknown timezone: 'Mars/Olympus'") as info:
        zone("Mars/Olympus")
    assert info.value.timezone == "Mars/Olympus"


def test_timepoint_validates_timezone():
    """Test that construction fails fast on an unknown timezone."""
    with pytest.raises(InvalidTimezoneError):
        TimePoint(instant=0, timezone="Not/AZone")


def test_timepoint_requires_integer_instant():
    """Test that non-integer instants are rejected."""
    with pytest.raises(TypeError, match="must be an int"):
        TimePoint(instant=1.5)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="must be an int"):
        TimePoint(instant=True)


def test_timepoint_defaults_to_utc():
    point = TimePoint(instant=1609459200)
    assert point.timezone == "UTC"
    assert point.to_datetime() == datetime(2021, 1, 1, tzinfo=timezone.utc)


def test_timepoint_renders_wall_clock_in_its_zone():
    """Test that wall-clock fields depend on the zone, the instant does not."""
    point = TimePoint(instant=1609459200, timezone="America/New_York")

    local = point.to_datetime()
    assert (local.year, local.month, local.day, local.hour) == (2020, 12, 31, 19)
    assert local.tzinfo == ZoneInfo("America/New_York")

    wall = point.wall_clock()
    assert wall.tzinfo is None
    assert wall == datetime(2020, 12, 31, 19, 0, 0)


def test_with_timezone_keeps_instant():
    """Test that relabeling never converts the instant."""
    point = TimePoint(instant=1609459200)
    tokyo = with_timezone(point, "Asia/Tokyo")

    assert tokyo.instant == point.instant
    assert tokyo.timezone == "Asia/Tokyo"
    assert tokyo.to_datetime().hour == 9
    # Original is untouched
    assert point.timezone == "UTC"


def test_with_timezone_method_and_validation():
    point = TimePoint(instant=0)
    assert point.with_timezone("Europe/London").timezone == "Europe/London"

    with pytest.raises(InvalidTimezoneError):
        point.with_timezone("Invalid/Timezone")


def test_timepoint_is_frozen_and_hashable():
    point = TimePoint(instant=10, timezone="UTC")
    with pytest.raises(AttributeError):
        point.instant = 11  # type: ignore[misc]

    assert point == TimePoint(instant=10, timezone="UTC")
    assert len({point, TimePoint(instant=10, timezone="UTC")}) == 1


def test_timepoint_str():
    point = TimePoint(instant=1609459200)
    assert str(point) == "TimePoint(2021-01-01T00:00:00+00:00, UTC)"
