"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class DateParseError(CalendarError):
    """Date string is not a valid YYYY-MM-DD calendar date."""

    pass


class MissingLocaleKeyError(CalendarError):
    """Locale pattern table lacks a template."""

    def __init__(self, key: str, locale: str | None = None):
        self.key = key
        self.locale = locale
        where = f" in locale '{locale}'" if locale else ""
        super().__init__(f"Missing locale template '{key}'{where}")


class UnsupportedLocaleError(CalendarError):
    """No pattern table registered for the requested locale."""

    pass


class DayDataError(CalendarError):
    """Day data for a year could not be fetched or decoded."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
