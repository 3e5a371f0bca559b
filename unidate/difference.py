"""Calendar-aware differences between two time points.

Years, months and days come from subtracting civil calendar fields and
borrowing with real month lengths, backed by python-dateutil's
relativedelta. What is left after them is split as elapsed seconds.
"""

import math
from dataclasses import dataclass, replace

from dateutil.relativedelta import relativedelta

from unidate.point import TimePoint
from unidate.util import DAY, HOUR, MINUTE


@dataclass(frozen=True, kw_only=True)
class CalendarBreakdown:
    """Gap between two instants, split into calendar units.

    Each unit holds the remainder after all larger units were taken out, so
    `months` stays within 0-11, `hours` within 0-23 and so on. `total_days`
    counts whole 24-hour days in the raw span. `signed_seconds` is measured
    from "now" to the target: negative means the target is in the past.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    total_days: int = 0
    signed_seconds: int = 0

    def __post_init__(self) -> None:
        for name in ("years", "months", "days", "hours", "minutes", "seconds"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(
                    f"CalendarBreakdown.{name} must be >= 0, got {value}"
                )

    @property
    def elapsed(self) -> int:
        """Unsigned span in seconds."""
        return abs(self.signed_seconds)


def diff(earlier: TimePoint, later: TimePoint) -> CalendarBreakdown:
    """Break the span from `earlier` to `later` into calendar units.

    Years, months and days are read on the wall clock of `later`'s
    timezone, so month and day boundaries are the local ones. Hours,
    minutes and seconds are real elapsed time past that calendar part,
    so a daylight-saving change never stretches or shrinks them.

    Raises:
        ValueError: If `earlier` is after `later`
    """
    if earlier.instant > later.instant:
        raise ValueError(
            f"diff() needs points in chronological order.\n"
            f"Got earlier={earlier.instant} > later={later.instant}\n"
            f"Hint: Use between(now, target) to handle either direction"
        )

    elapsed = later.instant - earlier.instant
    # UTC always lines up; it covers spans where the local clock skipped
    # or repeated time
    years, months, days, rest = _calendar_split(
        earlier.with_timezone(later.timezone), later
    ) or _calendar_split(earlier.with_timezone("UTC"), later.with_timezone("UTC"))
    hours, rest = divmod(rest, HOUR)
    minutes, seconds = divmod(rest, MINUTE)
    return CalendarBreakdown(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        total_days=elapsed // DAY,
        signed_seconds=elapsed,
    )


def _calendar_split(
    earlier: TimePoint, later: TimePoint
) -> tuple[int, int, int, int] | None:
    """(years, months, days, leftover seconds), or None if the zone's clock
    does not line up with elapsed time over this span."""
    start = earlier.to_datetime()
    start_wall = start.replace(tzinfo=None)
    end_wall = later.wall_clock()
    if end_wall < start_wall:
        return None

    delta = relativedelta(end_wall, start_wall)
    calendar = relativedelta(years=delta.years, months=delta.months, days=delta.days)
    reached = math.floor((start + calendar).timestamp())
    leftover = later.instant - reached
    if not 0 <= leftover < DAY:
        return None
    return delta.years, delta.months, delta.days, leftover


def between(now: TimePoint, target: TimePoint) -> CalendarBreakdown:
    """Breakdown of the gap between `now` and `target` in either direction."""
    if target.instant >= now.instant:
        breakdown = diff(now, target)
    else:
        breakdown = diff(target, now)
    return replace(breakdown, signed_seconds=target.instant - now.instant)
