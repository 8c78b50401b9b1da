"""List upcoming moon phases."""

import asyncio
import logging

import typer
from typing_extensions import Annotated

from almanac.exceptions import CalendarError
from cli.context import get_context
from cli.display import DayRenderer
from cli.utils import parse_date_argument

logger = logging.getLogger(__name__)


def moon_command(
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", min=1, help="Number of phases to show"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--from", help="First date to consider (YYYY-MM-DD, default today)"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale for relative phrases"),
    ] = None,
) -> None:
    """List the next moon phases, continuing into next year when needed."""
    ctx = get_context()
    reference = parse_date_argument(start)
    limit = limit or ctx.config.moon_default_limit

    try:
        sightings = asyncio.run(ctx.query.upcoming_moon(reference, limit=limit))
        formatter = ctx.formatter(locale)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    relatives = [formatter.text(s.date, reference) for s in sightings]
    DayRenderer().render_moon(sightings, relatives)
