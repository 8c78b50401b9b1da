"""Output layer for calendar exports."""

from almanac.output.base import CalendarWriter
from almanac.output.download import (
    DirectorySink,
    DownloadSink,
    ExportResult,
    ExportTrigger,
    load_bundle,
)
from almanac.output.event_builder import ICSEventBuilder
from almanac.output.ics_writer import ICSWriter, fold_line

__all__ = [
    "CalendarWriter",
    "DirectorySink",
    "DownloadSink",
    "ExportResult",
    "ExportTrigger",
    "ICSEventBuilder",
    "ICSWriter",
    "fold_line",
    "load_bundle",
]
