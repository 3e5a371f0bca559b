class DateParseError(ValueError):
    """Raised when text cannot be interpreted as a date/time."""

    def __init__(self, text: str):
        self.text: str = text
        super().__init__(f"Unable to parse date format: {text}")


class InvalidTimezoneError(ValueError):
    """Raised when a timezone identifier is unknown or malformed."""

    def __init__(self, timezone: str):
        self.timezone: str = timezone
        super().__init__(
            f"Unknown timezone: {timezone!r}\n"
            f"Hint: Use an IANA identifier such as 'UTC', 'America/New_York' "
            f"or 'Europe/London'"
        )
