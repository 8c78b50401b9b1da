"""Date difference and relative label models."""

from enum import Enum

from pydantic import BaseModel, Field


class DateDifference(BaseModel):
    """Calendar-field difference between an earlier and a later date.

    Applying ``years * 12 + months`` calendar months to the earlier date and
    then ``weeks * 7 + days`` days reproduces the later date.
    """

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    weeks: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0, le=6)

    @property
    def is_zero(self) -> bool:
        """True if every unit is zero."""
        return not (self.years or self.months or self.weeks or self.days)

    def units(self) -> list[tuple[str, int]]:
        """Non-zero units, largest first, as (unit, count) pairs."""
        pairs = [
            ("year", self.years),
            ("month", self.months),
            ("week", self.weeks),
            ("day", self.days),
        ]
        return [(unit, count) for unit, count in pairs if count > 0]


class Direction(str, Enum):
    """Direction of a target date relative to its reference."""

    PAST = "past"
    FUTURE = "future"
    SAME_DAY = "same_day"


class RelativeLabel(BaseModel):
    """Rendered relative date phrase."""

    text: str
    direction: Direction
    days: int
