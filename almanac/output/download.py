"""Hand serialized calendars to a download sink."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from almanac.exceptions import ExportError
from almanac.models.export import ExportBundle, ExportSelection
from almanac.output.base import CalendarWriter
from almanac.output.event_builder import ICSEventBuilder
from almanac.output.ics_writer import MEDIA_TYPE, ICSWriter

logger = logging.getLogger(__name__)


class DownloadSink(Protocol):
    """Anything that can save a file for the user."""

    def save(self, content: str, filename: str, media_type: str) -> Any:
        """Save content under the given filename."""
        ...


@dataclass
class ExportResult:
    """Serialized calendar ready for delivery."""

    content: str
    filename: str
    event_count: int
    media_type: str = MEDIA_TYPE


class DirectorySink:
    """Saves downloads as files in a directory."""

    def __init__(self, directory: Path):
        self.directory = directory

    def save(self, content: str, filename: str, media_type: str) -> Path:
        path = self.directory / filename
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        except OSError as e:
            # Remove partial file if it was created
            if path.is_file() and path.stat().st_size == 0:
                path.unlink(missing_ok=True)
            raise ExportError(f"Failed to save {path}: {e}") from e
        return path


def load_bundle(
    data: dict,
    calendar_name: str | None = None,
    domain: str | None = None,
) -> ExportBundle:
    """Validate a raw export bundle.

    Args:
        data: Decoded bundle JSON.
        calendar_name: Calendar name used when the bundle has none.
        domain: Domain used when the bundle has none.

    Raises:
        ExportError: If the bundle does not match the expected shape.
    """
    if not isinstance(data, dict):
        raise ExportError(f"Export bundle must be an object, got {type(data).__name__}")

    data = dict(data)
    if calendar_name and not data.get("calendar_name"):
        data["calendar_name"] = calendar_name
    if domain and not data.get("domain"):
        data["domain"] = domain

    try:
        return ExportBundle.model_validate(data)
    except ValidationError as e:
        raise ExportError(f"Invalid export bundle: {e}") from e


class ExportTrigger:
    """Runs event building and serialization, then triggers the download."""

    def __init__(
        self,
        builder: ICSEventBuilder | None = None,
        writer: CalendarWriter | None = None,
    ):
        self.builder = builder or ICSEventBuilder()
        self.writer = writer or ICSWriter()

    def prepare(
        self, bundle: ExportBundle, selection: ExportSelection
    ) -> ExportResult | None:
        """Serialize the selected events.

        Returns:
            ExportResult, or None when there is nothing to export.
        """
        events = self.builder.build(bundle, selection)
        if not events:
            logger.info("Nothing to export for the current selection")
            return None

        content = self.writer.serialize(events, bundle.calendar_name, bundle.domain)
        return ExportResult(
            content=content,
            filename=bundle.download_filename,
            event_count=len(events),
        )

    def export(
        self,
        bundle: ExportBundle,
        selection: ExportSelection,
        sink: DownloadSink,
    ) -> Any:
        """Serialize and save; the sink is not called when nothing matches.

        Returns:
            Whatever the sink returns, or None if nothing was exported.
        """
        result = self.prepare(bundle, selection)
        if result is None:
            return None

        saved = sink.save(result.content, result.filename, result.media_type)
        logger.info(f"Exported {result.event_count} events as {result.filename}")
        return saved
