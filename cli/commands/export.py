"""Export holidays and school holidays from a bundle to an ICS file."""

import json
import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from almanac.exceptions import ExportError
from almanac.models.export import ExportSelection
from almanac.output.download import DirectorySink, load_bundle
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def export_command(
    bundle_file: Annotated[
        Path,
        typer.Argument(help="Export bundle JSON (holidays, school holidays, regions)"),
    ],
    public: Annotated[
        bool,
        typer.Option("--public/--no-public", help="Include public holidays"),
    ] = True,
    observances: Annotated[
        bool,
        typer.Option("--observances", help="Include observances"),
    ] = False,
    school: Annotated[
        bool,
        typer.Option("--school", help="Include school holidays"),
    ] = False,
    regions: Annotated[
        list[str] | None,
        typer.Option("--region", "-r", help="Region id to include (repeatable, default all)"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for the ICS file"),
    ] = None,
) -> None:
    """
    Export selected categories to an ICS calendar file.

    Examples:
        almanac export bundle.json                       # Public holidays only
        almanac export bundle.json --observances --school
        almanac export bundle.json --no-public --school -r north -r south
    """
    ctx = get_context()
    config = ctx.config

    try:
        data = json.loads(bundle_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error(f"Bundle file not found: {bundle_file}")
        raise typer.Exit(1)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read bundle {bundle_file}: {e}")
        raise typer.Exit(1)

    selection = ExportSelection(
        include_public=public,
        include_observances=observances,
        include_school=school,
        regions=set(regions) if regions else None,
    )

    try:
        bundle = load_bundle(
            data,
            calendar_name=config.default_calendar_name,
            domain=config.default_domain,
        )
        path = ctx.export_trigger.export(
            bundle, selection, DirectorySink(output_dir or config.export_dir)
        )
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    if path is None:
        console.print("[yellow]Nothing to export[/yellow] [dim](no events match the selection)[/dim]")
        return

    console.print("[green bold]✓[/green bold] Exported ICS")
    console.print(f"  {path.resolve()}")
