"""Utility modules.

This package provides the date/time helpers exposed by the library.
"""

from .clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from .legacy import (
    LegacyCalendar,
    max_of_legacy,
    min_of_legacy,
    normalize_legacy,
    system_default_zone,
)
from .time import (
    end_of_day,
    first_day_of_month,
    format_iso_utc,
    is_between,
    last_day_of_month,
    max_of,
    min_of,
    parse_iso_utc,
    start_of_day,
    to_utc,
    to_utc_millis,
    utc_now,
    utc_now_millis,
)

__all__ = [
    # Clock capability
    "SYSTEM_CLOCK",
    "Clock",
    "FixedClock",
    "SystemClock",
    # Legacy calendar normalization
    "LegacyCalendar",
    "max_of_legacy",
    "min_of_legacy",
    "normalize_legacy",
    "system_default_zone",
    # Time utilities (canonical time handling)
    "end_of_day",
    "first_day_of_month",
    "format_iso_utc",
    "is_between",
    "last_day_of_month",
    "max_of",
    "min_of",
    "parse_iso_utc",
    "start_of_day",
    "to_utc",
    "to_utc_millis",
    "utc_now",
    "utc_now_millis",
]
