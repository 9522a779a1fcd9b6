"""Exception types and argument gates for the project."""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

T = TypeVar("T")


class InvalidArgument(ValueError):
    """Raised when a function receives an input its contract does not allow.

    Covers absent values passed to non-optional parameters, naive datetimes
    where an absolute instant is required, and vice versa.
    """


def ensure_present(value: T | None, name: str = "value") -> T:
    """Raise InvalidArgument if a value is missing, otherwise return it.

    Args:
        value: Value to check (may be None).
        name: Parameter name used in the error message.

    Returns:
        The value unchanged if it's not None.

    Raises:
        InvalidArgument: If value is None.
    """
    if value is None:
        raise InvalidArgument(f"{name} must not be None")
    return value


def ensure_local(value: Any, name: str = "value") -> datetime:
    """Require a naive datetime (a LocalDateTime).

    Args:
        value: Value to check.
        name: Parameter name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgument: If value is None, not a datetime, or timezone-aware.
    """
    ensure_present(value, name)
    if not isinstance(value, datetime):
        raise InvalidArgument(
            f"{name} must be a datetime, got {type(value).__name__}: {value!r}"
        )
    if value.tzinfo is not None:
        raise InvalidArgument(
            f"{name} must be a naive datetime, got timezone-aware: {value}"
        )
    return value


def ensure_zoned(value: Any, name: str = "value") -> datetime:
    """Require a timezone-aware datetime (a ZonedInstant).

    Args:
        value: Value to check.
        name: Parameter name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgument: If value is None, not a datetime, or naive.
    """
    ensure_present(value, name)
    if not isinstance(value, datetime):
        raise InvalidArgument(
            f"{name} must be a datetime, got {type(value).__name__}: {value!r}"
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgument(
            f"Cannot resolve naive datetime {value} to an instant. "
            "Attach a timezone first."
        )
    return value
