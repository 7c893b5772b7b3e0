"""Tests for the injectable time sources."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from when import Clock, FixedClock, SystemClock


def test_system_clock_returns_current_utc_time():
    """Test that SystemClock reads the wall clock in UTC."""
    before = datetime.now(timezone.utc)
    now = SystemClock().now()
    after = datetime.now(timezone.utc)

    assert now.utcoffset() == timedelta(0)
    assert before <= now <= after


def test_fixed_clock_always_returns_same_instant():
    """Test that FixedClock never moves."""
    instant = datetime(2019, 9, 21, 16, 56, 59, tzinfo=ZoneInfo("America/Los_Angeles"))
    clock = FixedClock(instant)

    assert clock.now() == instant
    assert clock.now() is clock.now()


def test_fixed_clock_at_timestamp():
    """Test building a FixedClock from a Unix timestamp."""
    clock = FixedClock.at_timestamp(1569110219)

    assert clock.now() == datetime(2019, 9, 21, 23, 56, 59, tzinfo=timezone.utc)


def test_fixed_clock_rejects_naive_datetime():
    """Test that FixedClock requires a timezone-aware instant."""
    with pytest.raises(TypeError, match="timezone-aware"):
        FixedClock(datetime(2019, 9, 21, 16, 56, 59))


def test_clock_is_abstract():
    """Test that Clock cannot be used without implementing now()."""
    with pytest.raises(TypeError):
        Clock()  # type: ignore[abstract]


def test_custom_clock_subclass():
    """Test that any Clock subclass can stand in for the wall clock."""

    class EpochClock(Clock):
        def now(self) -> datetime:
            return datetime(1970, 1, 1, tzinfo=timezone.utc)

    assert EpochClock().now().timestamp() == 0
