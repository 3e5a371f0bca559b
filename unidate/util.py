"""Utility constants and helpers for unidate.

Time unit constants represent durations in seconds.
These are used throughout the API for consistent time representation.
"""

from time import time as current_time
from typing import Callable, TypeAlias

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

DEFAULT_TIMEZONE = "UTC"

# Future phrases below this many seconds read "soon"
SOON_THRESHOLD = 60 * SECOND

# Lower bounds of the hour, day and month tiers for future phrases
HOUR_THRESHOLD = 45 * MINUTE
DAY_THRESHOLD = 23 * HOUR + 30 * MINUTE
MONTH_THRESHOLD = 30 * DAY

# Remainder after whole calendar months that rounds up to the next month
MONTH_HALF = 15 * DAY

Clock: TypeAlias = Callable[[], int]


def system_clock() -> int:
    """Current Unix time in whole seconds."""
    return int(current_time())
