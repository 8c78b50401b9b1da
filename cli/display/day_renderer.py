"""Rich renderer for day details, moon phases and month grids."""

from datetime import date

from rich.table import Table

from almanac.calendar_query import MonthGrid, MoonSighting
from almanac.models.day import DayRecord
from cli.display.console import console
from cli.display.formatters import (
    format_iso_week,
    format_long_date,
    format_moon,
    format_regions,
)

WEEKDAY_HEADERS = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


class DayRenderer:
    """Render day data using Rich."""

    def render_day(self, day: date, record: DayRecord | None, relative: str) -> None:
        """Render everything known about a single day.

        Args:
            day: The date shown.
            record: Day record, or None if there is no data.
            relative: Relative phrase for the date (e.g., "in 3 days").
        """
        console.print()
        console.print(f"[bold]{format_long_date(day)}[/bold]  [dim]{format_iso_week(day)}[/dim]")
        console.print(f"[dim]{relative}[/dim]")
        console.print()

        if record is None or record.is_empty:
            console.print("[dim]No data for this day[/dim]")
            return

        for holiday in record.holidays:
            style = "green" if holiday.is_public else "yellow"
            console.print(f"  [{style}]{holiday.name}[/{style}] [dim]({holiday.type})[/dim]")

        for span in record.school:
            console.print(
                f"  [magenta]{span.name}[/magenta] [dim]{format_regions(span.regions)}[/dim]"
            )

        if record.moon:
            time_str = f" {record.moon.time}" if record.moon.time else ""
            console.print(f"  {record.moon.symbol} {record.moon.name}[dim]{time_str}[/dim]")

        if record.sun:
            console.print()
            table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
            table.add_column("CITY", style="cyan")
            table.add_column("SUNRISE")
            table.add_column("SUNSET")
            for entry in record.sun:
                table.add_row(entry.city, entry.sunrise, entry.sunset)
            console.print(table)

    def render_moon(self, sightings: list[MoonSighting], relatives: list[str]) -> None:
        """Render upcoming moon phases as a table."""
        if not sightings:
            console.print("No upcoming moon phases found")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("")
        table.add_column("PHASE", style="cyan")
        table.add_column("DATE")
        table.add_column("TIME", style="dim")
        table.add_column("WHEN", style="dim")

        for sighting, relative in zip(sightings, relatives):
            table.add_row(
                sighting.event.symbol,
                sighting.event.name,
                sighting.date.isoformat(),
                sighting.event.time or "-",
                relative,
            )

        console.print(table)

    def render_month(self, grid: MonthGrid) -> None:
        """Render a month grid with week numbers and its public holidays."""
        title = date(grid.year, grid.month, 1).strftime("%B %Y")
        table = Table(title=title, show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Wk", justify="right", style="dim")
        for header in WEEKDAY_HEADERS:
            table.add_column(header, justify="right")

        for week in grid.weeks:
            row = [str(week.week_number)]
            for cell in week.cells:
                if not cell.in_month:
                    row.append("")
                    continue
                text = f"{cell.date.day}{format_moon(cell.moon_phase)}"
                if cell.is_holiday:
                    text = f"[bold green]{text}[/bold green]"
                elif cell.is_school_holiday:
                    text = f"[magenta]{text}[/magenta]"
                elif cell.is_weekend:
                    text = f"[dim]{text}[/dim]"
                if cell.is_today:
                    text = f"[reverse]{text}[/reverse]"
                row.append(text)
            table.add_row(*row)

        console.print(table)

        if grid.holidays:
            console.print()
            for day, holiday in grid.holidays:
                console.print(f"  [green]{day.day:>2}[/green] {holiday.name}")
