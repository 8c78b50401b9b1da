"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    config_command,
    day_command,
    export_command,
    month_command,
    moon_command,
    relative_command,
    week_command,
)
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="almanac",
    help="Calendar almanac: relative dates, ISO weeks, day data and ICS export.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("export")(export_command)
app.command("relative")(relative_command)
app.command("week")(week_command)
app.command("day")(day_command)
app.command("moon")(moon_command)
app.command("month")(month_command)
app.command("config")(config_command)
