"""Canonical time and date utilities.

This module provides the pure date/time helpers used across the codebase:
- UTC conversions between LocalDateTime, aware datetimes and epoch millis
- Max/min selection that ignores None and falls back to sentinels
- Inclusive range checks with open-ended bounds
- Day and month boundary helpers

A LocalDateTime is a naive `datetime`. Anything that represents an absolute
instant must be timezone-aware. Conversions to and from epoch milliseconds
always go through UTC.
"""

from __future__ import annotations

import calendar
from datetime import UTC, date, datetime, timedelta
from typing import overload

from ..errors import InvalidArgument, ensure_local, ensure_present, ensure_zoned
from ..global_config import (
    ABSENT_EPOCH_MILLIS,
    EPOCH,
    LOCAL_DATETIME_MAX,
    LOCAL_DATETIME_MIN,
    UTC_DESIGNATOR,
)
from .clock import SYSTEM_CLOCK, Clock

_ONE_MILLISECOND = timedelta(milliseconds=1)


def _present_locals(date_times: tuple[datetime | None, ...]) -> list[datetime]:
    return [
        ensure_local(dt, f"date_times[{i}]")
        for i, dt in enumerate(date_times)
        if dt is not None
    ]


def max_of(*date_times: datetime | None) -> datetime:
    """Return the latest of the given LocalDateTimes.

    None entries are ignored.

    Args:
        *date_times: Naive datetimes, any of which may be None.

    Returns:
        The maximum value, or LOCAL_DATETIME_MIN if nothing is left after
        dropping None (including the zero-argument call).

    Raises:
        InvalidArgument: If a non-None entry is not a naive datetime.
    """
    return max(_present_locals(date_times), default=LOCAL_DATETIME_MIN)


def min_of(*date_times: datetime | None) -> datetime:
    """Return the earliest of the given LocalDateTimes.

    Mirror of `max_of`; falls back to LOCAL_DATETIME_MAX when empty.
    """
    return min(_present_locals(date_times), default=LOCAL_DATETIME_MAX)


def is_between(
    value: datetime,
    lower: datetime | None = None,
    upper: datetime | None = None,
) -> bool:
    """Check whether value lies in [lower, upper], both ends inclusive.

    A missing lower bound means "no lower restriction", a missing upper bound
    means "no upper restriction".

    Raises:
        InvalidArgument: If value is None or any given datetime is not naive.
    """
    value = ensure_local(value, "value")
    lower = LOCAL_DATETIME_MIN if lower is None else ensure_local(lower, "lower")
    upper = LOCAL_DATETIME_MAX if upper is None else ensure_local(upper, "upper")
    return lower <= value <= upper


@overload
def to_utc(value: None) -> None: ...


@overload
def to_utc(value: int) -> datetime | None: ...


@overload
def to_utc(value: datetime) -> datetime: ...


def to_utc(value: datetime | int | None) -> datetime | None:
    """Convert an absolute timestamp to a UTC LocalDateTime.

    Accepts either an aware datetime or an epoch millisecond count.

    Args:
        value: Aware datetime, epoch milliseconds, or None.

    Returns:
        Naive datetime holding the UTC wall-clock time. None if value is None,
        or if value is the epoch millisecond count 0, which is reserved to mean
        "no timestamp" (it does NOT map to 1970-01-01T00:00:00).

    Raises:
        InvalidArgument: If value is a naive datetime, a bool, or another type.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidArgument(f"Expected epoch milliseconds, got bool: {value}")
    if isinstance(value, int):
        if value == ABSENT_EPOCH_MILLIS:
            return None
        try:
            return (EPOCH + value * _ONE_MILLISECOND).replace(tzinfo=None)
        except OverflowError as e:
            raise InvalidArgument(f"Epoch milliseconds out of range: {value}") from e
    if isinstance(value, datetime):
        zoned = ensure_zoned(value, "value")
        try:
            return zoned.astimezone(UTC).replace(tzinfo=None)
        except OverflowError as e:
            raise InvalidArgument(f"UTC time of {value} is out of range") from e
    raise InvalidArgument(
        f"Expected datetime or epoch milliseconds, got {type(value).__name__}: {value!r}"
    )


def to_utc_millis(zoned: datetime) -> int:
    """Return the epoch milliseconds of an aware datetime.

    Aware subtraction measures the instant against the UTC epoch directly, so
    values at the edges of the calendar range work too. Sub-millisecond digits
    are floored, matching how negative (pre-1970) instants round.

    Raises:
        InvalidArgument: If zoned is None or naive.
    """
    zoned = ensure_zoned(zoned, "zoned")
    return (zoned - EPOCH) // _ONE_MILLISECOND


def utc_now(*, clock: Clock | None = None) -> datetime:
    """Return the current UTC time as a LocalDateTime.

    Args:
        clock: Clock to read. Defaults to the system clock.
    """
    instant = ensure_zoned((clock or SYSTEM_CLOCK).now(), "clock.now()")
    return instant.astimezone(UTC).replace(tzinfo=None)


def utc_now_millis(*, clock: Clock | None = None) -> int:
    """Return the current time as UTC epoch milliseconds.

    Args:
        clock: Clock to read. Defaults to the system clock.
    """
    return to_utc_millis((clock or SYSTEM_CLOCK).now())


def format_iso_utc(local_dt: datetime) -> str:
    """Format a LocalDateTime, read as UTC, as an ISO-8601 string with Z.

    Seconds are always present. A fraction is printed only when non-zero: three
    digits when it is a whole number of milliseconds, six otherwise.
    Example: datetime(2019, 10, 1, 5, 5, 5) -> "2019-10-01T05:05:05Z".

    Raises:
        InvalidArgument: If local_dt is None or timezone-aware.
    """
    local_dt = ensure_local(local_dt, "local_dt")
    if local_dt.microsecond and local_dt.microsecond % 1000 == 0:
        return local_dt.isoformat(timespec="milliseconds") + UTC_DESIGNATOR
    return local_dt.isoformat() + UTC_DESIGNATOR


def parse_iso_utc(s: str) -> datetime:
    """Parse an ISO-8601 string with a zone designator into a UTC LocalDateTime.

    Accepts a trailing Z, +00:00 or any other explicit offset; the result is
    re-anchored to UTC and returned naive. Inverse of `format_iso_utc`.

    Raises:
        InvalidArgument: If s is None, unparseable, or has no offset.
    """
    ensure_present(s, "s")
    if not isinstance(s, str):
        raise InvalidArgument(f"Expected string, got {type(s).__name__}: {s!r}")

    text = s.strip()
    if text.endswith(UTC_DESIGNATOR):
        text = text[: -len(UTC_DESIGNATOR)] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidArgument(f"Invalid ISO timestamp: {s}") from e

    if dt.tzinfo is None:
        raise InvalidArgument(
            f"Timestamp {s} is naive. Provide a Z or +HH:MM zone designator."
        )
    try:
        return dt.astimezone(UTC).replace(tzinfo=None)
    except OverflowError as e:
        raise InvalidArgument(f"UTC time of {s} is out of range") from e


def start_of_day(local_dt: datetime) -> datetime:
    """Return local_dt with hour, minute and second set to 00:00:00.

    Only those three fields change; microseconds are kept as-is.
    """
    local_dt = ensure_local(local_dt, "local_dt")
    return local_dt.replace(hour=0, minute=0, second=0)


def end_of_day(local_dt: datetime) -> datetime:
    """Return local_dt with hour, minute and second set to 23:59:59.

    Only those three fields change; this is NOT 23:59:59.999999 and
    microseconds are kept as-is.
    """
    local_dt = ensure_local(local_dt, "local_dt")
    return local_dt.replace(hour=23, minute=59, second=59)


def first_day_of_month(local_dt: datetime) -> date:
    """Return the date of the first day of local_dt's month."""
    local_dt = ensure_local(local_dt, "local_dt")
    return date(local_dt.year, local_dt.month, 1)


def last_day_of_month(local_dt: datetime) -> date:
    """Return the date of the last day of local_dt's month.

    Handles 28/29/30/31-day months, leap years included.
    """
    local_dt = ensure_local(local_dt, "local_dt")
    _, days_in_month = calendar.monthrange(local_dt.year, local_dt.month)
    return date(local_dt.year, local_dt.month, days_in_month)
