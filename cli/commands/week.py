"""Show the ISO week number of a date."""

import typer
from typing_extensions import Annotated

from almanac.calendar_math import iso_week_year
from cli.display import console, format_long_date
from cli.utils import parse_date_argument


def week_command(
    target: Annotated[
        str | None,
        typer.Argument(help="Date (YYYY-MM-DD, default today)"),
    ] = None,
) -> None:
    """Show the ISO week number and week-year of a date."""
    day = parse_date_argument(target)
    year, week = iso_week_year(day)

    console.print(f"Week [bold cyan]{week}[/bold cyan] of {year}")
    if year != day.year:
        console.print(f"[dim]{format_long_date(day)} belongs to ISO year {year}[/dim]")
