"""Turn flexible date input into a TimePoint.

Accepted input falls into three cases, each with its own path:

- instant-bearing values (TimePoint, datetime, date) are relabeled as-is;
- numbers (and strings holding only a number) are Unix timestamps;
- any other string is parsed as text: "now", "today", "tomorrow",
  "yesterday", relative offsets like "+1 hour 15 minutes" or "3 days ago",
  and finally anything python-dateutil's parser understands.
"""

import logging
import math
import re
from datetime import date, datetime, time, timedelta
from typing import TypeAlias
from zoneinfo import ZoneInfo

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from unidate.errors import DateParseError
from unidate.point import TimePoint, zone
from unidate.util import DEFAULT_TIMEZONE, HOUR, MINUTE, SECOND, system_clock

logger = logging.getLogger(__name__)

DateInput: TypeAlias = TimePoint | datetime | date | int | float | str

_NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

_OFFSET_TOKEN = re.compile(
    r"[\s,]*(?:and\s+)?"
    r"(?P<sign>[+-]?)\s*(?P<amount>\d+)\s*"
    r"(?P<unit>second|sec|minute|min|hour|day|week|month|year)s?\b"
    r"[\s,]*",
    re.IGNORECASE,
)

# Units applied as elapsed seconds; the rest move the wall clock
_EXACT_UNITS = {
    "second": SECOND,
    "sec": SECOND,
    "minute": MINUTE,
    "min": MINUTE,
    "hour": HOUR,
}
_CALENDAR_UNITS = {
    "day": "days",
    "week": "weeks",
    "month": "months",
    "year": "years",
}

_DAY_WORDS = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


def normalize(
    value: DateInput,
    timezone: str | None = DEFAULT_TIMEZONE,
    *,
    now: int | None = None,
) -> TimePoint:
    """
    Build a TimePoint from an instant, a number or a piece of text.

    Args:
        value: Instant-bearing value, Unix timestamp, or date/time text
        timezone: IANA timezone name. None keeps the zone carried by
            `value` when it has one and falls back to UTC otherwise.
        now: Unix time anchoring "now" and relative offsets
            (defaults to the system clock)

    Returns:
        TimePoint for the instant, labeled with the resolved timezone

    Raises:
        DateParseError: If text cannot be interpreted as a date/time
        InvalidTimezoneError: If `timezone` is not a known IANA name
        TypeError: If `value` is of an unsupported type

    Example:
        >>> normalize(1609459200).instant
        1609459200
        >>> normalize("2021-01-01 15:30", "America/New_York").timezone
        'America/New_York'
    """
    tz = _resolve_timezone(value, timezone)

    if isinstance(value, (TimePoint, datetime, date)):
        return TimePoint(instant=_from_instant(value, tz), timezone=tz)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return TimePoint(instant=_from_number(value), timezone=tz)
    if isinstance(value, str):
        return TimePoint(instant=_from_text(value, tz, now), timezone=tz)

    raise TypeError(
        f"Date input must be a TimePoint, datetime, date, number or string.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  normalize(1609459200)  # Unix seconds\n"
        f"  normalize('2021-01-01 15:30:00')  # text\n"
        f"  normalize(datetime(2021, 1, 1, tzinfo=timezone.utc))  # instant"
    )


def _resolve_timezone(value: DateInput, timezone: str | None) -> str:
    if timezone is not None:
        zone(timezone)
        return timezone
    if isinstance(value, TimePoint):
        return value.timezone
    if isinstance(value, datetime) and isinstance(value.tzinfo, ZoneInfo):
        return value.tzinfo.key
    return DEFAULT_TIMEZONE


def _from_number(value: int | float) -> int:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(
            f"Unix timestamp must be a finite number.\n"
            f"Got {value!r}\n"
            f"Hint: Pass whole or fractional seconds since 1970-01-01 UTC,\n"
            f"  normalize(1609459200)  # 2021-01-01 00:00:00 UTC"
        )
    return math.floor(value)


def _from_instant(value: TimePoint | datetime | date, tz: str) -> int:
    if isinstance(value, TimePoint):
        return value.instant
    if isinstance(value, datetime):
        if value.tzinfo is None:
            # Naive datetimes are wall-clock time in the target zone
            value = value.replace(tzinfo=zone(tz))
        return math.floor(value.timestamp())
    midnight = datetime.combine(value, time.min, tzinfo=zone(tz))
    return math.floor(midnight.timestamp())


def _from_text(text: str, tz: str, now: int | None) -> int:
    body = text.strip()
    if _NUMERIC_PATTERN.fullmatch(body):
        if "." in body:
            return math.floor(float(body))
        return int(body)

    reference = system_clock() if now is None else now
    local_now = datetime.fromtimestamp(reference, tz=zone(tz))
    keyword = body.lower()

    if keyword == "now":
        return reference
    if keyword in _DAY_WORDS:
        midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
        return math.floor(
            (midnight + timedelta(days=_DAY_WORDS[keyword])).timestamp()
        )

    offset = _parse_offset(keyword)
    if offset is not None:
        calendar, exact = offset
        return math.floor((local_now + calendar).timestamp()) + exact

    logger.debug("Falling back to dateutil for %r", text)
    midnight = local_now.replace(
        hour=0, minute=0, second=0, microsecond=0, tzinfo=None
    )
    try:
        parsed = dateutil_parser.parse(body, default=midnight)
    except (ValueError, OverflowError) as exc:
        logger.debug("dateutil rejected %r: %s", text, exc)
        raise DateParseError(text) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone(tz))
    return math.floor(parsed.timestamp())


def _parse_offset(text: str) -> tuple[relativedelta, int] | None:
    """Parse "+1 hour 15 minutes", "in 2 days" or "3 weeks ago".

    Returns the calendar part and the exact part in seconds, or None when
    `text` is not entirely made of offset tokens.
    """
    direction = 1
    if text.startswith("in "):
        text = text[3:]
    elif text.endswith(" ago"):
        text = text[:-4]
        direction = -1
    elif text.endswith(" from now"):
        text = text[:-9]

    calendar = relativedelta()
    exact = 0
    sign = 1
    pos = 0
    while pos < len(text):
        match = _OFFSET_TOKEN.match(text, pos)
        if match is None:
            return None
        # Unsigned tokens take the sign of the token before them
        if match["sign"]:
            sign = -1 if match["sign"] == "-" else 1
        amount = sign * int(match["amount"])
        unit = match["unit"].lower()
        if unit in _EXACT_UNITS:
            exact += amount * _EXACT_UNITS[unit]
        else:
            calendar += relativedelta(**{_CALENDAR_UNITS[unit]: amount})
        pos = match.end()

    if pos == 0:
        return None
    if direction < 0:
        return -calendar, -exact
    return calendar, exact
