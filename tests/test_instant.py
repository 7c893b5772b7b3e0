"""Tests for Instant and Breakdown."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from when import Breakdown, Instant


def test_instant_from_datetime_keeps_local_fields():
    """Test that from_datetime reads the fields without converting zones."""
    dt = datetime(2007, 1, 17, 23, 41, 12, tzinfo=ZoneInfo("America/Los_Angeles"))

    result = Instant.from_datetime(dt)

    assert result == Instant(year=2007, month=1, day=17, hour=23, minute=41, second=12)
    assert result.fields() == (2007, 1, 17, 23, 41, 12)


def test_instant_from_datetime_drops_microseconds():
    dt = datetime(2019, 9, 21, 23, 56, 59, 999_999, tzinfo=timezone.utc)

    assert Instant.from_datetime(dt).second == 59


def test_instant_is_frozen():
    """Test that Instant fields cannot be reassigned."""
    t = Instant(year=2019, month=9, day=21, hour=23, minute=56, second=59)

    with pytest.raises(FrozenInstanceError):
        t.minute = 0  # type: ignore[misc]


def test_instant_str():
    t = Instant(year=987, month=3, day=4, hour=5, minute=6, second=7)
    assert str(t) == "0987-03-04 05:06:07"


def test_breakdown_defaults_to_zero():
    """Test that an empty Breakdown has every field at zero."""
    diff = Breakdown()

    assert diff.is_zero
    assert [value for _, value in diff.items()] == [0, 0, 0, 0, 0, 0]


def test_breakdown_items_run_coarse_to_fine():
    """Test that items() pairs units with values from years to seconds."""
    diff = Breakdown(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)

    assert list(diff.items()) == [
        ("year", 1),
        ("month", 2),
        ("day", 3),
        ("hour", 4),
        ("minute", 5),
        ("second", 6),
    ]
    assert not diff.is_zero


def test_breakdown_requires_keywords():
    """Test that Breakdown fields are keyword-only."""
    with pytest.raises(TypeError):
        Breakdown(1, 2, 3)  # type: ignore[misc]


def test_breakdown_str():
    diff = Breakdown(years=12, months=8, days=3, hours=17, minutes=15, seconds=47)
    assert str(diff) == "Breakdown(12y 8mo 3d 17h 15m 47s)"
