"""UniversalDate: a date value with human-friendly renderings.

Example:
    >>> from unidate import UniversalDate
    >>>
    >>> meeting = UniversalDate("2021-01-01 15:30:00")
    >>> meeting.to_human()
    'January 1, 2021 at 3:30 PM'
    >>> meeting.set_timezone("America/New_York").to_human()
    'January 1, 2021 at 10:30 AM'
    >>> meeting.to_human("%d-%m-%Y")
    '01-01-2021'
"""

from datetime import datetime
from typing import Any

from typing_extensions import override

from unidate.normalize import DateInput, normalize
from unidate.point import TimePoint, with_timezone
from unidate.relative import time_ago
from unidate.util import DEFAULT_TIMEZONE, Clock, system_clock


class UniversalDate:
    """Immutable instant + timezone pair with absolute and relative renderings.

    "Now" is read from `clock` (Unix seconds), both when parsing relative
    input such as "now" or "+2 hours" and when rendering `to_time_ago()`.
    """

    __slots__ = ("_point", "_clock")

    def __init__(
        self,
        date: "DateInput | UniversalDate" = "now",
        timezone: str | None = DEFAULT_TIMEZONE,
        *,
        clock: Clock = system_clock,
    ):
        """
        Initialize a date.

        Args:
            date: TimePoint, datetime, date, Unix timestamp, date/time text,
                or another UniversalDate (default "now")
            timezone: IANA timezone name (default "UTC"). None keeps the zone
                carried by `date` when it has one.
            clock: Callable returning the current Unix time in seconds

        Raises:
            DateParseError: If `date` is text that cannot be parsed
            InvalidTimezoneError: If `timezone` is not a known IANA name
        """
        if isinstance(date, UniversalDate):
            date = date.point
        self._clock: Clock = clock
        self._point: TimePoint = normalize(date, timezone, now=clock())

    @classmethod
    def make(
        cls,
        date: "DateInput | UniversalDate" = "now",
        timezone: str | None = DEFAULT_TIMEZONE,
        *,
        clock: Clock = system_clock,
    ) -> "UniversalDate":
        return cls(date, timezone, clock=clock)

    @classmethod
    def _from_point(cls, point: TimePoint, clock: Clock) -> "UniversalDate":
        """Wrap an already normalized point without parsing again."""
        date = cls.__new__(cls)
        date._point = point
        date._clock = clock
        return date

    @property
    def point(self) -> TimePoint:
        return self._point

    @property
    def timestamp(self) -> int:
        """Unix time in seconds."""
        return self._point.instant

    @property
    def timezone(self) -> str:
        return self._point.timezone

    def to_human(self, format: str | None = None) -> str:
        """Render as "January 1, 2021 at 3:30 PM", or with a strftime pattern."""
        if format:
            return self.format(format)

        dt = self.get_datetime()
        hour = dt.hour % 12 or 12
        return f"{dt:%B} {dt.day}, {dt.year} at {hour}:{dt:%M} {dt:%p}"

    def to_time_ago(self) -> str:
        """Render relative to now: "2 hours ago", "in 3 days", "soon"..."""
        return time_ago(self._point, now=self._clock())

    def format(self, format: str) -> str:
        """Render with a strftime pattern in this date's timezone."""
        return self.get_datetime().strftime(format)

    def get_datetime(self) -> datetime:
        """Timezone-aware datetime in this date's timezone."""
        return self._point.to_datetime()

    def set_timezone(self, timezone: str) -> "UniversalDate":
        """Return a copy rendered in `timezone`; the instant is unchanged.

        Raises:
            InvalidTimezoneError: If `timezone` is not a known IANA name
        """
        return self._from_point(with_timezone(self._point, timezone), self._clock)

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UniversalDate):
            return NotImplemented
        return self._point == other._point

    @override
    def __hash__(self) -> int:
        return hash(self._point)

    @override
    def __str__(self) -> str:
        return self.to_human()

    @override
    def __repr__(self) -> str:
        return f"UniversalDate({self.get_datetime().isoformat()!r}, {self.timezone!r})"


def make(
    date: DateInput | UniversalDate = "now",
    timezone: str | None = DEFAULT_TIMEZONE,
    *,
    clock: Clock = system_clock,
) -> UniversalDate:
    """Create a UniversalDate; same arguments as the constructor."""
    return UniversalDate(date, timezone, clock=clock)
