"""Tests for argument gates and the error taxonomy."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from temporal_utils.errors import InvalidArgument, ensure_local, ensure_present, ensure_zoned


def test_invalid_argument_is_value_error() -> None:
    assert issubclass(InvalidArgument, ValueError)


def test_ensure_present_returns_value() -> None:
    assert ensure_present(0) == 0
    assert ensure_present("") == ""


def test_ensure_present_rejects_none() -> None:
    with pytest.raises(InvalidArgument, match="widget must not be None"):
        ensure_present(None, "widget")


def test_ensure_local() -> None:
    value = datetime(2019, 10, 1)
    assert ensure_local(value) is value
    with pytest.raises(InvalidArgument, match="naive"):
        ensure_local(value.replace(tzinfo=UTC))
    with pytest.raises(InvalidArgument, match="must be a datetime"):
        ensure_local(1_569_906_305_000)


def test_ensure_zoned() -> None:
    value = datetime(2019, 10, 1, tzinfo=UTC)
    assert ensure_zoned(value) is value
    with pytest.raises(InvalidArgument, match="naive"):
        ensure_zoned(value.replace(tzinfo=None))
    with pytest.raises(InvalidArgument, match="must be a datetime"):
        ensure_zoned("2019-10-01T00:00:00Z")
