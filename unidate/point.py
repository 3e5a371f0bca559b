from dataclasses import dataclass, replace
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from unidate.errors import InvalidTimezoneError
from unidate.util import DEFAULT_TIMEZONE


def zone(tz: str) -> ZoneInfo:
    """Look up an IANA timezone, raising InvalidTimezoneError if unknown."""
    if not isinstance(tz, str) or not tz.strip():
        raise InvalidTimezoneError(str(tz))
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(tz) from exc


@dataclass(frozen=True, kw_only=True)
class TimePoint:
    """An absolute instant paired with the timezone used to render it.

    `instant` is whole seconds since the Unix epoch and never depends on
    `timezone`; only the wall-clock fields derived from it do.
    """

    instant: int
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        if isinstance(self.instant, bool) or not isinstance(self.instant, int):
            raise TypeError(
                f"TimePoint instant must be an int (Unix seconds).\n"
                f"Got {type(self.instant).__name__!r}: {self.instant!r}"
            )
        # Fail fast on unknown zones
        zone(self.timezone)

    @property
    def zone(self) -> ZoneInfo:
        return zone(self.timezone)

    def to_datetime(self) -> datetime:
        """Timezone-aware datetime for this instant in `timezone`."""
        return datetime.fromtimestamp(self.instant, tz=self.zone)

    def wall_clock(self) -> datetime:
        """Naive datetime holding the local calendar fields."""
        return self.to_datetime().replace(tzinfo=None)

    def with_timezone(self, tz: str) -> "TimePoint":
        return with_timezone(self, tz)

    def __str__(self) -> str:
        return f"TimePoint({self.to_datetime().isoformat()}, {self.timezone})"


def with_timezone(point: TimePoint, tz: str) -> TimePoint:
    """Relabel `point` with a new timezone; the instant is unchanged."""
    zone(tz)
    return replace(point, timezone=tz)
