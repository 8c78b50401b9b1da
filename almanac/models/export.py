"""Export bundle and filter selection models."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_CALENDAR_NAME = "Calendar"
DEFAULT_DOMAIN = "calendar.local"
DEFAULT_FILENAME = "calendar"


class ExportHoliday(BaseModel):
    """Holiday entry in an export bundle."""

    date: datetime.date
    name: str
    type: str


class ExportSchoolHoliday(BaseModel):
    """School holiday span in an export bundle (``end`` is inclusive)."""

    name: str
    start: datetime.date
    end: datetime.date
    regions: list[str] = Field(default_factory=list)


class Region(BaseModel):
    """Region id with its display name."""

    id: str
    name: str


class ExportBundle(BaseModel):
    """Data embedded by a page for calendar export."""

    holidays: list[ExportHoliday] = Field(default_factory=list)
    school_holidays: list[ExportSchoolHoliday] = Field(default_factory=list)
    regions: list[Region] = Field(default_factory=list)
    calendar_name: str = DEFAULT_CALENDAR_NAME
    domain: str = DEFAULT_DOMAIN
    filename: str = DEFAULT_FILENAME

    @field_validator("holidays", "school_holidays", "regions", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("calendar_name", mode="before")
    @classmethod
    def default_calendar_name(cls, v):
        return v or DEFAULT_CALENDAR_NAME

    @field_validator("domain", mode="before")
    @classmethod
    def default_domain(cls, v):
        return v or DEFAULT_DOMAIN

    @field_validator("filename", mode="before")
    @classmethod
    def default_filename(cls, v):
        return v or DEFAULT_FILENAME

    def region_names(self) -> dict[str, str]:
        """Region id to display name lookup."""
        return {region.id: region.name for region in self.regions}

    def referenced_regions(self) -> set[str]:
        """Every region id used by a school holiday span."""
        return {rid for span in self.school_holidays for rid in span.regions}

    @property
    def download_filename(self) -> str:
        return f"{self.filename}.ics"


class ExportSelection(BaseModel):
    """User's choice of categories and regions to export.

    ``regions`` of None selects every region referenced by the data; an
    empty set selects none.
    """

    include_public: bool = False
    include_observances: bool = False
    include_school: bool = False
    regions: Optional[set[str]] = None

    @property
    def any_selected(self) -> bool:
        return self.include_public or self.include_observances or self.include_school
