"""Pure date arithmetic: ISO weeks, calendar differences and day counts."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from almanac.exceptions import DateParseError
from almanac.models.dates import DateDifference


@dataclass(frozen=True)
class DateParseResult:
    """Result of parsing a YYYY-MM-DD string."""

    value: date | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap(self) -> date:
        """Return the parsed date or raise DateParseError."""
        if self.value is None:
            raise DateParseError(self.error or "Invalid date")
        return self.value


def parse_iso_date(text: str) -> DateParseResult:
    """Parse a strict YYYY-MM-DD string into a date.

    Args:
        text: Date string such as "2025-12-25".

    Returns:
        DateParseResult holding either the date or an error message.
    """
    if not isinstance(text, str):
        return DateParseResult(error=f"Expected a date string, got {type(text).__name__}")

    parts = text.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return DateParseResult(error=f"Invalid date format: {text!r}. Use YYYY-MM-DD.")
    if len(parts[0]) != 4 or len(parts[1]) != 2 or len(parts[2]) != 2:
        return DateParseResult(error=f"Invalid date format: {text!r}. Use YYYY-MM-DD.")

    try:
        return DateParseResult(value=date(int(parts[0]), int(parts[1]), int(parts[2])))
    except ValueError as e:
        return DateParseResult(error=f"Invalid date {text!r}: {e}")


def _as_date(value: date) -> date:
    """Reduce a datetime to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def iso_week_year(d: date) -> tuple[int, int]:
    """ISO-8601 (week-year, week) pairing for a date.

    The date is shifted to the Thursday of its week; that Thursday's year
    owns the week.
    """
    d = _as_date(d)
    thursday = d + timedelta(days=4 - d.isoweekday())
    ordinal = thursday.timetuple().tm_yday
    return thursday.year, 1 + (ordinal - 1) // 7


def iso_week(d: date) -> int:
    """ISO-8601 week number (1-53)."""
    return iso_week_year(d)[1]


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def add_months(d: date, months: int) -> date:
    """Shift a date by whole calendar months, clamping to the month end."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(d.day, days_in_month(year, month)))


def field_difference(earlier: date, later: date) -> DateDifference:
    """Calendar-field difference between two ordered dates.

    Years, months and days are taken field by field. A negative day count
    borrows the month preceding ``later``'s month; a negative month count
    borrows a year. The remaining days are split into weeks and days.

    Args:
        earlier: Start date.
        later: End date, on or after ``earlier``.

    Returns:
        DateDifference with ``days`` in [0, 6].

    Raises:
        ValueError: If ``later`` precedes ``earlier``.
    """
    earlier = _as_date(earlier)
    later = _as_date(later)
    if later < earlier:
        raise ValueError(f"later ({later}) must not precede earlier ({earlier})")

    total_months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if later.day < earlier.day:
        total_months -= 1

    # Anchor lands in later's month or the one before it, clamped to its end
    anchor = add_months(earlier, total_months)
    remaining = (later - anchor).days

    years, months = divmod(total_months, 12)
    weeks, days = divmod(remaining, 7)
    return DateDifference(years=years, months=months, weeks=weeks, days=days)


def add_difference(start: date, diff: DateDifference) -> date:
    """Apply a DateDifference to a date (inverse of field_difference)."""
    shifted = add_months(_as_date(start), diff.years * 12 + diff.months)
    return shifted + timedelta(days=diff.weeks * 7 + diff.days)


def day_count(a: date, b: date) -> int:
    """Signed number of whole days from ``a`` to ``b``."""
    return (_as_date(b) - _as_date(a)).days
