"""Display holidays, school holidays, sun and moon data for a day."""

import asyncio
import logging

import typer
from typing_extensions import Annotated

from almanac.exceptions import CalendarError
from cli.context import get_context
from cli.display import DayRenderer
from cli.utils import parse_date_argument

logger = logging.getLogger(__name__)


def day_command(
    target: Annotated[
        str,
        typer.Argument(help="Date (YYYY-MM-DD)"),
    ],
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale for the relative phrase"),
    ] = None,
) -> None:
    """
    Display everything known about a day.

    Examples:
        almanac day 2025-12-25
        almanac day 2025-04-27 --locale nl
    """
    ctx = get_context()
    day = parse_date_argument(target)

    try:
        record = asyncio.run(ctx.query.on_date(day))
        relative = ctx.formatter(locale).text(day)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    DayRenderer().render_day(day, record, relative)
