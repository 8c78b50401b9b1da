"""Describe a date relative to today (or another date)."""

import logging

import typer
from typing_extensions import Annotated

from almanac.exceptions import UnsupportedLocaleError
from cli.context import get_context
from cli.display import console
from cli.utils import parse_date_argument

logger = logging.getLogger(__name__)


def relative_command(
    target: Annotated[
        str,
        typer.Argument(help="Date to describe (YYYY-MM-DD)"),
    ],
    ref: Annotated[
        str | None,
        typer.Option("--ref", help="Reference date (YYYY-MM-DD, default today)"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale code (en, nl, de)"),
    ] = None,
) -> None:
    """
    Print a relative phrase such as "in 3 days" or "2 months and 1 week ago".

    Examples:
        almanac relative 2025-12-25
        almanac relative 2025-12-25 --ref 2025-01-01 --locale nl
    """
    ctx = get_context()
    target_date = parse_date_argument(target)
    reference = parse_date_argument(ref)

    try:
        formatter = ctx.formatter(locale)
    except UnsupportedLocaleError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(formatter.text(target_date, reference))
