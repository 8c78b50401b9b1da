"""Pydantic models for the almanac."""

from almanac.models.dates import DateDifference, Direction, RelativeLabel
from almanac.models.day import (
    DayRecord,
    Holiday,
    HolidayType,
    MoonEvent,
    MoonPhase,
    SchoolHolidaySpan,
    SunEntry,
)
from almanac.models.event import CalendarEvent, EventCategory
from almanac.models.export import (
    ExportBundle,
    ExportHoliday,
    ExportSchoolHoliday,
    ExportSelection,
    Region,
)
from almanac.models.locale import Affix, AffixPosition, LocalePatterns

__all__ = [
    "Affix",
    "AffixPosition",
    "CalendarEvent",
    "DateDifference",
    "DayRecord",
    "Direction",
    "EventCategory",
    "ExportBundle",
    "ExportHoliday",
    "ExportSchoolHoliday",
    "ExportSelection",
    "Holiday",
    "HolidayType",
    "LocalePatterns",
    "MoonEvent",
    "MoonPhase",
    "Region",
    "RelativeLabel",
    "SchoolHolidaySpan",
    "SunEntry",
]
