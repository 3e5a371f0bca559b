"""Relative ("3 hours ago" / "in 2 days") phrasing for calendar breakdowns.

Past phrases report the largest non-zero unit of the exact breakdown without
rounding. Future phrases are rounded through a threshold table:

    elapsed < 60 seconds          "soon"
    rounded minutes < 45          minutes
    elapsed < 23 hours 30 minutes hours, rounded half up
    rounded days < 30             days, rounded half up
    rounded months < 12           calendar months, half a month rounds up
    otherwise                     years from the rounded month count

Any span holding a whole calendar month goes straight to the month tier,
so "+1 month" from February 1 reads "in 1 month" although it is 28 days.
"""

from unidate.difference import CalendarBreakdown, between
from unidate.point import TimePoint
from unidate.util import (
    DAY,
    DAY_THRESHOLD,
    HOUR,
    HOUR_THRESHOLD,
    MINUTE,
    MONTH_HALF,
    MONTH_THRESHOLD,
    SOON_THRESHOLD,
    system_clock,
)

JUST_NOW = "just now"
SOON = "soon"

_PAST_UNITS = ("year", "month", "day", "hour", "minute")


def format_relative(
    breakdown: CalendarBreakdown, signed_seconds: int | None = None
) -> str:
    """
    Phrase a breakdown relative to "now".

    Args:
        breakdown: Calendar breakdown between "now" and the target
        signed_seconds: Seconds from "now" to the target, negative for the
            past (defaults to `breakdown.signed_seconds`)

    Returns:
        "just now", "soon", "<n> <unit>[s] ago" or "in <n> <unit>[s]"

    Example:
        >>> format_relative(CalendarBreakdown(hours=2, signed_seconds=-7200))
        '2 hours ago'
        >>> format_relative(CalendarBreakdown(minutes=45, signed_seconds=2700))
        'in 1 hour'
    """
    if signed_seconds is None:
        signed_seconds = breakdown.signed_seconds

    if signed_seconds < 0:
        return _past(breakdown)
    if signed_seconds == 0:
        return JUST_NOW
    return _future(breakdown, signed_seconds)


def time_ago(point: TimePoint, *, now: int | None = None) -> str:
    """Phrase `point` relative to `now` (the system clock by default)."""
    reference = TimePoint(
        instant=system_clock() if now is None else now,
        timezone=point.timezone,
    )
    return format_relative(between(reference, point))


def pluralize(magnitude: int, unit: str) -> str:
    """Render "1 day" / "2 days"."""
    suffix = "s" if magnitude > 1 else ""
    return f"{magnitude} {unit}{suffix}"


def _past(breakdown: CalendarBreakdown) -> str:
    for unit in _PAST_UNITS:
        magnitude: int = getattr(breakdown, f"{unit}s")
        if magnitude > 0:
            return f"{pluralize(magnitude, unit)} ago"
    return JUST_NOW


def _future(breakdown: CalendarBreakdown, elapsed: int) -> str:
    if elapsed < SOON_THRESHOLD:
        return SOON

    whole_months = breakdown.years * 12 + breakdown.months
    if not whole_months and elapsed < MONTH_THRESHOLD:
        # A tier whose rounded value reaches the next tier's floor moves up
        minutes = max(1, _round_half_up(elapsed, MINUTE))
        if minutes < HOUR_THRESHOLD // MINUTE:
            return _in(minutes, "minute")
        if elapsed < DAY_THRESHOLD:
            return _in(_round_half_up(elapsed, HOUR), "hour")
        days = _round_half_up(elapsed, DAY)
        if days < MONTH_THRESHOLD // DAY:
            return _in(days, "day")

    months = whole_months
    remainder = (
        breakdown.days * DAY
        + breakdown.hours * HOUR
        + breakdown.minutes * MINUTE
        + breakdown.seconds
    )
    if remainder >= MONTH_HALF:
        months += 1
    if months < 12:
        return _in(max(1, months), "month")

    return _in(max(1, (months + 6) // 12), "year")


def _in(magnitude: int, unit: str) -> str:
    return f"in {pluralize(magnitude, unit)}"


def _round_half_up(value: int, unit: int) -> int:
    return (value + unit // 2) // unit
