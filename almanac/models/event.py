"""All-day calendar event model with Pydantic v2 validation."""

from datetime import date, timedelta
from enum import Enum

from pydantic import BaseModel, model_validator


class EventCategory(str, Enum):
    """ICS CATEGORIES value for exported events."""

    HOLIDAY = "HOLIDAY"
    OBSERVANCE = "OBSERVANCE"
    SCHOOL_HOLIDAY = "SCHOOL_HOLIDAY"


class CalendarEvent(BaseModel):
    """Normalized all-day event ready for ICS serialization.

    ``dtend`` is exclusive: a single-day event on 2025-12-25 ends on
    2025-12-26.
    """

    uid: str
    dtstart: date
    dtend: date
    summary: str
    category: EventCategory

    @model_validator(mode="after")
    def validate_dates(self):
        """DTEND must fall after DTSTART."""
        if self.dtend <= self.dtstart:
            raise ValueError("dtend must be after dtstart")
        return self

    @classmethod
    def all_day(
        cls,
        uid: str,
        first_day: date,
        last_day: date,
        summary: str,
        category: EventCategory,
    ) -> "CalendarEvent":
        """Create an event covering ``first_day`` through ``last_day`` inclusive."""
        return cls(
            uid=uid,
            dtstart=first_day,
            dtend=last_day + timedelta(days=1),
            summary=summary,
            category=category,
        )

    @property
    def duration_days(self) -> int:
        return (self.dtend - self.dtstart).days
