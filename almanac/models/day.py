"""Per-day metadata models (holidays, school holidays, sun and moon)."""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HolidayType(str, Enum):
    """Holiday category."""

    PUBLIC = "public"
    OBSERVANCE = "observance"


class MoonPhase(str, Enum):
    """Principal moon phases."""

    NEW_MOON = "new_moon"
    FIRST_QUARTER = "first_quarter"
    FULL_MOON = "full_moon"
    LAST_QUARTER = "last_quarter"


MOON_SYMBOLS = {
    MoonPhase.NEW_MOON: "\U0001F311",
    MoonPhase.FIRST_QUARTER: "\U0001F313",
    MoonPhase.FULL_MOON: "\U0001F315",
    MoonPhase.LAST_QUARTER: "\U0001F317",
}


class Holiday(BaseModel):
    """Public holiday or observance."""

    name: str
    type: str
    date: Optional[datetime.date] = None

    @property
    def is_public(self) -> bool:
        return self.type == HolidayType.PUBLIC.value

    @property
    def is_observance(self) -> bool:
        return self.type == HolidayType.OBSERVANCE.value


class SchoolHolidaySpan(BaseModel):
    """School holiday applying to one or more regions."""

    name: str
    regions: list[str] = Field(default_factory=list)
    start: Optional[datetime.date] = None
    end: Optional[datetime.date] = None


class SunEntry(BaseModel):
    """Sunrise and sunset for a city."""

    model_config = ConfigDict(populate_by_name=True)

    city: str
    sunrise: str = Field(alias="rise")
    sunset: str = Field(alias="set")


class MoonEvent(BaseModel):
    """Moon phase occurring on a day."""

    phase: MoonPhase
    name: str
    time: Optional[str] = None

    @property
    def symbol(self) -> str:
        return MOON_SYMBOLS[self.phase]


class DayRecord(BaseModel):
    """All metadata known for one calendar day."""

    holidays: list[Holiday] = Field(default_factory=list)
    school: list[SchoolHolidaySpan] = Field(default_factory=list)
    sun: list[SunEntry] = Field(default_factory=list)
    moon: Optional[MoonEvent] = None

    @property
    def public_holidays(self) -> list[Holiday]:
        return [h for h in self.holidays if h.is_public]

    @property
    def observances(self) -> list[Holiday]:
        return [h for h in self.holidays if h.is_observance]

    @property
    def is_empty(self) -> bool:
        return not (self.holidays or self.school or self.sun or self.moon)
