"""Tests for export triggering and download sinks."""

import pytest

from almanac.exceptions import ExportError
from almanac.models.export import ExportSelection
from almanac.output.download import DirectorySink, ExportTrigger, load_bundle
from almanac.output.ics_writer import MEDIA_TYPE


class RecordingSink:
    def __init__(self):
        self.saved = []

    def save(self, content, filename, media_type):
        self.saved.append((content, filename, media_type))
        return filename


def test_export_skips_sink_when_nothing_selected(bundle):
    sink = RecordingSink()
    assert ExportTrigger().export(bundle, ExportSelection(), sink) is None
    assert sink.saved == []


def test_export_skips_sink_when_nothing_matches(bundle):
    sink = RecordingSink()
    selection = ExportSelection(include_school=True, regions={"west"})
    assert ExportTrigger().export(bundle, selection, sink) is None
    assert sink.saved == []


def test_export_saves_calendar(bundle):
    sink = RecordingSink()
    result = ExportTrigger().export(bundle, ExportSelection(include_public=True), sink)

    assert result == "calendar.ics"
    content, filename, media_type = sink.saved[0]
    assert filename == "calendar.ics"
    assert media_type == MEDIA_TYPE == "text/calendar;charset=utf-8"
    assert "UID:20251225-christmas@calendar.local\r\n" in content


def test_prepare_reports_event_count(bundle_data):
    bundle = load_bundle({**bundle_data, "filename": "feestdagen-2025"})
    selection = ExportSelection(include_public=True, include_school=True)
    result = ExportTrigger().prepare(bundle, selection)

    assert result.event_count == 3
    assert result.filename == "feestdagen-2025.ics"


def test_directory_sink_creates_directory(tmp_path):
    sink = DirectorySink(tmp_path / "exports")
    path = sink.save("BEGIN:VCALENDAR\r\n", "calendar.ics", MEDIA_TYPE)

    assert path == tmp_path / "exports" / "calendar.ics"
    assert path.read_bytes() == b"BEGIN:VCALENDAR\r\n"


def test_directory_sink_path_is_a_file(tmp_path):
    occupied = tmp_path / "exports"
    occupied.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ExportError):
        DirectorySink(occupied).save("BEGIN:VCALENDAR\r\n", "calendar.ics", MEDIA_TYPE)


def test_export_into_unusable_directory_raises(tmp_path, bundle):
    occupied = tmp_path / "exports"
    occupied.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ExportError):
        ExportTrigger().export(
            bundle, ExportSelection(include_public=True), DirectorySink(occupied)
        )
    assert occupied.read_text(encoding="utf-8") == "not a directory"


def test_export_to_directory(tmp_path, bundle):
    path = ExportTrigger().export(
        bundle, ExportSelection(include_observances=True), DirectorySink(tmp_path)
    )
    assert path.name == "calendar.ics"
    assert "SUMMARY:Sinterklaas" in path.read_text(encoding="utf-8")


def test_load_bundle_fills_defaults(bundle_data):
    bundle = load_bundle(bundle_data, calendar_name="Feestdagen", domain="example.nl")
    assert bundle.calendar_name == "Feestdagen"
    assert bundle.domain == "example.nl"


def test_load_bundle_keeps_own_metadata(bundle_data):
    data = {**bundle_data, "calendar_name": "Mine", "domain": "mine.org"}
    bundle = load_bundle(data, calendar_name="Feestdagen", domain="example.nl")
    assert bundle.calendar_name == "Mine"
    assert bundle.domain == "mine.org"


def test_load_bundle_treats_null_lists_as_empty():
    bundle = load_bundle({"holidays": None, "school_holidays": None, "calendar_name": ""})
    assert bundle.holidays == []
    assert bundle.school_holidays == []
    assert bundle.calendar_name == "Calendar"


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "dict"],
        {"holidays": "Christmas"},
        {"holidays": [{"date": "25-12-2025", "name": "Christmas", "type": "public"}]},
    ],
)
def test_load_bundle_rejects_invalid_data(data):
    with pytest.raises(ExportError):
        load_bundle(data)
