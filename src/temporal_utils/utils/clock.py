"""Clock capability used by the "now" helpers.

The current instant is the only ambient state the time helpers read, so it is
passed in explicitly. Production code uses `SYSTEM_CLOCK`; tests hand in a
`FixedClock`.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

from ..errors import ensure_zoned

logger = logging.getLogger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Zero-argument provider of the current instant."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...


class SystemClock:
    """Clock backed by the host system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same instant until advanced.

    Args:
        instant: Timezone-aware datetime to report.

    Raises:
        InvalidArgument: If instant is None or naive.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = ensure_zoned(instant, "instant")

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by delta and return the new instant."""
        self._instant = self._instant + delta
        logger.debug("FixedClock advanced by %s to %s", delta, self._instant)
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


SYSTEM_CLOCK: Clock = SystemClock()
