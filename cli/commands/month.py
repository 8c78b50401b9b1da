"""Display a month overview with ISO week numbers."""

import asyncio
from datetime import date

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import DayRenderer


def month_command(
    year: Annotated[
        int | None,
        typer.Argument(help="Year (default current)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Argument(min=1, max=12, help="Month 1-12 (default current)"),
    ] = None,
) -> None:
    """
    Display a month grid with holidays, school holidays and moon phases.

    Examples:
        almanac month              # Current month
        almanac month 2025 12
    """
    ctx = get_context()
    today = date.today()

    if (year is None) != (month is None):
        raise typer.BadParameter("Give both YEAR and MONTH, or neither")
    if year is None:
        year, month = today.year, today.month

    grid = asyncio.run(ctx.query.month_grid(year, month, today=today))
    DayRenderer().render_month(grid)
