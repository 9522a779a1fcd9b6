"""Normalization of legacy calendar values into LocalDateTimes.

A legacy calendar value is anything that carries an absolute instant plus an
optional embedded timezone: it exposes `timestamp()` (POSIX seconds) and a
`tzinfo` attribute. Aware and naive `datetime` objects both qualify, as do
`pandas.Timestamp` values. When `tzinfo` is None the host's system default
zone is assumed, unless the caller passes `default_zone`. A naive `datetime`
is read as wall-clock time in that assumed zone.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, tzinfo
from typing import Protocol, runtime_checkable

from tzlocal import get_localzone

from ..errors import InvalidArgument
from .time import max_of, min_of

logger = logging.getLogger(__name__)


@runtime_checkable
class LegacyCalendar(Protocol):
    """Instant with an optional embedded timezone."""

    tzinfo: tzinfo | None

    def timestamp(self) -> float: ...


def system_default_zone() -> tzinfo:
    """Return the host's configured local timezone."""
    return get_localzone()


def normalize_legacy(
    value: LegacyCalendar | None,
    *,
    default_zone: tzinfo | None = None,
) -> datetime | None:
    """Convert a legacy calendar value to a LocalDateTime.

    The instant is read as wall-clock time in the value's own timezone. If it
    has none, `default_zone` is used, falling back to the system default zone.

    Args:
        value: Legacy calendar value, or None.
        default_zone: Zone to assume when value carries no timezone.

    Returns:
        Naive datetime, or None if value is None.

    Raises:
        InvalidArgument: If value does not expose `timestamp()` and `tzinfo`.
    """
    if value is None:
        return None
    if not isinstance(value, LegacyCalendar):
        raise InvalidArgument(
            f"Expected a calendar value with timestamp() and tzinfo, "
            f"got {type(value).__name__}: {value!r}"
        )

    zone = value.tzinfo
    if zone is None:
        zone = default_zone if default_zone is not None else system_default_zone()
        logger.debug("No timezone on %r; assuming %s", value, zone)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            # Wall time in the assumed zone; the UTC round trip resolves gaps and folds
            value = value.replace(tzinfo=zone)
        try:
            local = value.astimezone(UTC).astimezone(zone)
        except OverflowError as e:
            raise InvalidArgument(f"{value} is out of range in {zone}") from e
    else:
        local = datetime.fromtimestamp(value.timestamp(), zone)
    return local.replace(tzinfo=None)


def max_of_legacy(
    *values: LegacyCalendar | None,
    default_zone: tzinfo | None = None,
) -> datetime:
    """Normalize each value and return the latest, see `max_of`."""
    return max_of(*(normalize_legacy(v, default_zone=default_zone) for v in values))


def min_of_legacy(
    *values: LegacyCalendar | None,
    default_zone: tzinfo | None = None,
) -> datetime:
    """Normalize each value and return the earliest, see `min_of`."""
    return min_of(*(normalize_legacy(v, default_zone=default_zone) for v in values))
