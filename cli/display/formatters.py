"""Pure formatting functions for display output."""

from datetime import date

from almanac.calendar_math import iso_week_year
from almanac.models.day import MOON_SYMBOLS, MoonPhase


def format_long_date(d: date) -> str:
    """Format date for headings.

    Args:
        d: Date to format.

    Returns:
        Formatted date string (e.g., "Thursday 25 December 2025").
    """
    return f"{d.strftime('%A')} {d.day} {d.strftime('%B %Y')}"


def format_iso_week(d: date) -> str:
    """Format the ISO week of a date (e.g., "2025-W01")."""
    year, week = iso_week_year(d)
    return f"{year}-W{week:02d}"


def format_moon(phase: MoonPhase | None) -> str:
    """Moon symbol for a phase, empty when there is none."""
    if phase is None:
        return ""
    return MOON_SYMBOLS[phase]


def format_regions(regions: list[str]) -> str:
    if not regions:
        return "-"
    return ", ".join(regions)
