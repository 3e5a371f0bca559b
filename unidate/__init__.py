from .date import UniversalDate, make
from .difference import CalendarBreakdown, between, diff
from .errors import DateParseError, InvalidTimezoneError
from .normalize import DateInput, normalize
from .point import TimePoint, with_timezone, zone
from .relative import format_relative, pluralize, time_ago

__all__ = [
    "UniversalDate",
    "make",
    "TimePoint",
    "DateInput",
    "CalendarBreakdown",
    "normalize",
    "with_timezone",
    "zone",
    "diff",
    "between",
    "format_relative",
    "time_ago",
    "pluralize",
    "DateParseError",
    "InvalidTimezoneError",
]
