"""Day query module for looking up and summarising day data."""

import calendar
from datetime import date

from pydantic import BaseModel

from almanac.calendar_math import days_in_month, iso_week
from almanac.models.day import DayRecord, Holiday, MoonEvent, MoonPhase
from almanac.storage.day_data_store import DayDataStore


class MoonSighting(BaseModel):
    """Moon phase on a specific date."""

    date: date
    event: MoonEvent


class DayCell(BaseModel):
    """One day in a month grid."""

    date: date
    in_month: bool
    is_today: bool = False
    is_weekend: bool = False
    is_holiday: bool = False
    is_school_holiday: bool = False
    moon_phase: MoonPhase | None = None
    week_number: int


class WeekRow(BaseModel):
    """Monday-first week of a month grid."""

    week_number: int
    cells: list[DayCell]


class MonthGrid(BaseModel):
    """Month laid out as full weeks with ISO week numbers."""

    year: int
    month: int
    weeks: list[WeekRow]
    holidays: list[tuple[date, Holiday]]


class DayQuery:
    """Read-side helpers over a DayDataStore.

    Provides the lookups used by day tooltips, the month overview and the
    upcoming moon phase list.
    """

    def __init__(self, store: DayDataStore):
        """Initialize with a store.

        Args:
            store: Day data store to read from.
        """
        self.store = store

    async def on_date(self, target: date) -> DayRecord | None:
        """Get the record for a date, None when no data exists."""
        return await self.store.get_day(target)

    async def public_holidays_in_month(
        self, year: int, month: int
    ) -> list[tuple[date, Holiday]]:
        """Public holidays of a month in date order.

        Args:
            year: Year of the month.
            month: Month number (1-12).

        Returns:
            (date, holiday) pairs.
        """
        records = await self.store.load_year(year)
        found = []
        for day in range(1, days_in_month(year, month) + 1):
            current = date(year, month, day)
            record = records.get(current.isoformat())
            if record is None:
                continue
            for holiday in record.public_holidays:
                found.append((current, holiday))
        return found

    async def upcoming_moon(
        self, reference: date | None = None, limit: int = 4
    ) -> list[MoonSighting]:
        """Next moon phases on or after a date.

        Continues into the following year when the reference year runs out.

        Args:
            reference: First date to consider (defaults to today).
            limit: Maximum number of sightings.

        Returns:
            Sightings sorted by date.
        """
        reference = reference or date.today()
        sightings: list[MoonSighting] = []

        for year in (reference.year, reference.year + 1):
            if len(sightings) >= limit:
                break
            records = await self.store.load_year(year)
            for key in sorted(records):
                if len(sightings) >= limit:
                    break
                record = records[key]
                if record.moon is None:
                    continue
                day = date.fromisoformat(key)
                if day < reference:
                    continue
                sightings.append(MoonSighting(date=day, event=record.moon))

        return sightings

    async def month_grid(
        self, year: int, month: int, today: date | None = None
    ) -> MonthGrid:
        """Lay out a month as Monday-first weeks.

        Days of adjacent months fill the first and last rows and carry no
        flags. Each row is numbered by the ISO week of its first in-month day.

        Args:
            year: Year of the month.
            month: Month number (1-12).
            today: Date to flag as today (defaults to today).

        Returns:
            MonthGrid with rows and the month's public holidays.
        """
        today = today or date.today()
        records = await self.store.load_year(year)

        weeks = []
        for row in calendar.Calendar(firstweekday=calendar.MONDAY).monthdatescalendar(
            year, month
        ):
            cells = []
            for day in row:
                in_month = day.month == month
                record = records.get(day.isoformat()) if in_month else None
                cells.append(
                    DayCell(
                        date=day,
                        in_month=in_month,
                        is_today=in_month and day == today,
                        is_weekend=in_month and day.weekday() >= 5,
                        is_holiday=bool(record and record.public_holidays),
                        is_school_holiday=bool(record and record.school),
                        moon_phase=record.moon.phase if record and record.moon else None,
                        week_number=iso_week(day),
                    )
                )
            first_in_month = next(c.date for c in cells if c.in_month)
            weeks.append(WeekRow(week_number=iso_week(first_in_month), cells=cells))

        holidays = await self.public_holidays_in_month(year, month)
        return MonthGrid(year=year, month=month, weeks=weeks, holidays=holidays)
