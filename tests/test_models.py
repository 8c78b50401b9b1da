"""Tests for Pydantic models."""

from datetime import date

import pytest
from pydantic import ValidationError

from almanac.models import (
    Affix,
    AffixPosition,
    DateDifference,
    DayRecord,
    ExportBundle,
    ExportSelection,
    Holiday,
    MoonPhase,
    SunEntry,
)


def test_day_record_from_json_shape():
    record = DayRecord.model_validate(
        {
            "holidays": [
                {"name": "Christmas", "type": "public"},
                {"name": "Sinterklaas", "type": "observance"},
            ],
            "sun": [{"city": "Utrecht", "rise": "08:47", "set": "16:30"}],
            "moon": {"phase": "full_moon", "name": "Full moon", "time": "00:14"},
        }
    )
    assert [h.name for h in record.public_holidays] == ["Christmas"]
    assert [h.name for h in record.observances] == ["Sinterklaas"]
    assert record.sun[0].sunset == "16:30"
    assert record.moon.phase == MoonPhase.FULL_MOON
    assert record.moon.symbol == "\U0001F315"
    assert not record.is_empty


def test_empty_day_record():
    assert DayRecord().is_empty


def test_sun_entry_accepts_field_names():
    entry = SunEntry(city="Utrecht", sunrise="08:47", sunset="16:30")
    assert entry.sunrise == "08:47"


def test_holiday_with_date():
    holiday = Holiday(name="Christmas", type="public", date=date(2025, 12, 25))
    assert holiday.is_public
    assert not holiday.is_observance


def test_date_difference_units():
    diff = DateDifference(years=1, weeks=2)
    assert diff.units() == [("year", 1), ("week", 2)]
    assert not diff.is_zero
    assert DateDifference().is_zero


def test_date_difference_rejects_out_of_range_days():
    with pytest.raises(ValidationError):
        DateDifference(days=7)
    with pytest.raises(ValidationError):
        DateDifference(months=-1)


def test_affix_apply_and_strip():
    suffix = Affix(text="geleden", position=AffixPosition.SUFFIX)
    assert suffix.apply("3 dagen") == "3 dagen geleden"
    assert suffix.strip("3 dagen Geleden") == "3 dagen"

    prefix = Affix(text="vor", position=AffixPosition.PREFIX)
    assert prefix.apply("2 Tagen") == "vor 2 Tagen"
    assert prefix.strip("Vor 2 Tagen") == "2 Tagen"
    assert prefix.strip("2 Tagen") == "2 Tagen"


def test_export_bundle_region_helpers(bundle):
    assert bundle.region_names() == {"north": "Noord", "south": "Zuid"}
    assert bundle.referenced_regions() == {"north", "south"}
    assert bundle.download_filename == "calendar.ics"


def test_export_bundle_defaults():
    bundle = ExportBundle(calendar_name=None, domain="", filename=None)
    assert bundle.calendar_name == "Calendar"
    assert bundle.domain == "calendar.local"
    assert bundle.filename == "calendar"


def test_export_selection():
    assert not ExportSelection().any_selected
    assert ExportSelection(include_observances=True).any_selected
    assert ExportSelection.model_validate({"regions": ["a", "a"]}).regions == {"a"}
