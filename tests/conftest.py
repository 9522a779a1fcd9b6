from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from temporal_utils.utils.clock import FixedClock

# 2019-10-01T05:05:05Z
REFERENCE_EPOCH_MILLIS = 1_569_906_305_000
REFERENCE_LOCAL = datetime(2019, 10, 1, 5, 5, 5)


class FakeCalendar:
    """Legacy calendar stand-in: a fixed POSIX instant with an optional zone."""

    def __init__(self, epoch_seconds: float, tzinfo=None) -> None:
        self._epoch_seconds = epoch_seconds
        self.tzinfo = tzinfo

    def timestamp(self) -> float:
        return self._epoch_seconds

    def __repr__(self) -> str:
        return f"FakeCalendar({self._epoch_seconds}, tzinfo={self.tzinfo})"


@pytest.fixture
def kolkata() -> ZoneInfo:
    """
    A zone with a half-hour offset (+05:30) and no DST, so expected hours are stable.
    """
    return ZoneInfo("Asia/Kolkata")


@pytest.fixture
def reference_instant() -> datetime:
    """2019-10-01T05:05:05Z as an aware datetime."""
    return REFERENCE_LOCAL.replace(tzinfo=UTC)


@pytest.fixture
def fixed_clock(reference_instant: datetime) -> FixedClock:
    """
    Clock pinned to the reference instant. Tests that read "now" use this
    instead of the system clock.
    """
    return FixedClock(reference_instant)


@pytest.fixture
def make_calendar():
    """Factory for FakeCalendar values."""
    return FakeCalendar
