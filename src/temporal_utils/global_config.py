"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only the shared
sentinels and cross-cutting constants that many modules import.

There are no environment variables and no config files: every value here is
fixed at import time.
"""

from datetime import UTC, datetime

# Core Names
PROJECT_NAME = "temporal-utils"
PACKAGE_NAME = "temporal_utils"

# Sentinel LocalDateTime values: "before any real date" / "after any real date".
# Used as the result of empty max/min aggregations and as unbounded range ends.
LOCAL_DATETIME_MIN: datetime = datetime.min
LOCAL_DATETIME_MAX: datetime = datetime.max

# Epoch millisecond value reserved to mean "no timestamp".
ABSENT_EPOCH_MILLIS = 0

# 1970-01-01T00:00:00Z
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=UTC)

# Zone designator appended to ISO-8601 UTC strings
UTC_DESIGNATOR = "Z"
