"""CLI utilities for argument parsing."""

from datetime import date

import typer

from almanac.calendar_math import parse_iso_date


def parse_date_argument(value: str | None, default: date | None = None) -> date:
    """Parse a YYYY-MM-DD argument.

    Args:
        value: Raw argument, or None to use the default.
        default: Date used when value is None (defaults to today).

    Returns:
        Parsed date.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    if value is None:
        return default or date.today()

    result = parse_iso_date(value)
    if not result.ok:
        raise typer.BadParameter(result.error)
    return result.value
