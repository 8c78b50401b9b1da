import json
from datetime import date

import pytest

from almanac import create_app
from almanac.config import CalendarConfig
from almanac.exceptions import DayDataError
from almanac.models.export import ExportBundle
from almanac.storage.day_data_store import DayDataStore

ENV_VARS = [
    "ALMANAC_DATA_DIR",
    "ALMANAC_DATA_URL",
    "ALMANAC_EXPORT_DIR",
    "ALMANAC_LOCALE",
    "ALMANAC_DOMAIN",
    "ALMANAC_CALENDAR_NAME",
    "ALMANAC_FETCH_TIMEOUT",
    "LOG_DIR",
    "LOG_FILENAME",
    "MOON_DEFAULT_LIMIT",
]

DAY_DATA = {
    2025: {
        "2025-12-05": {
            "holidays": [{"name": "Sinterklaas", "type": "observance"}],
            "moon": {"phase": "full_moon", "name": "Full moon", "time": "00:14"},
        },
        "2025-12-20": {"moon": {"phase": "new_moon", "name": "New moon"}},
        "2025-12-25": {
            "holidays": [{"name": "Christmas", "type": "public"}],
            "school": [{"name": "Christmas break", "regions": ["north", "south"]}],
            "sun": [{"city": "Utrecht", "rise": "08:47", "set": "16:30"}],
        },
        "2025-12-27": {
            "school": [{"name": "Christmas break", "regions": ["north", "south"]}],
            "moon": {"phase": "first_quarter", "name": "First quarter"},
        },
    },
    2026: {
        "2026-01-03": {"moon": {"phase": "full_moon", "name": "Full moon"}},
        "2026-01-10": {"moon": {"phase": "last_quarter", "name": "Last quarter"}},
    },
}


class FakeYearFetcher:
    """In-memory fetcher that records which years were requested."""

    def __init__(self, documents=None, failures=None):
        self.documents = documents or {}
        self.failures = failures or set()
        self.calls = []

    async def fetch(self, year):
        self.calls.append(year)
        if year in self.failures or year not in self.documents:
            raise DayDataError(f"No data for {year}")
        return self.documents[year]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of config loading."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def day_data():
    """Day data documents keyed by year."""
    return DAY_DATA


@pytest.fixture
def make_fetcher():
    """Factory for in-memory fetchers."""
    return FakeYearFetcher


@pytest.fixture
def fetcher():
    return FakeYearFetcher(documents=DAY_DATA)


@pytest.fixture
def store(fetcher):
    return DayDataStore(fetcher)


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding 2025.json."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "2025.json").write_text(json.dumps(DAY_DATA[2025]), encoding="utf-8")
    return directory


@pytest.fixture
def config(tmp_path, data_dir):
    return CalendarConfig(
        data_dir=data_dir,
        export_dir=tmp_path / "exports",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    app = create_app(config)
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def bundle_data():
    """Raw export bundle as a page would embed it."""
    return {
        "holidays": [
            {"date": "2025-12-25", "name": "Christmas", "type": "public"},
            {"date": "2025-12-05", "name": "Sinterklaas", "type": "observance"},
            {"date": "2025-12-25", "name": "Christmas", "type": "public"},
        ],
        "school_holidays": [
            {
                "name": "Kerstvakantie",
                "start": "2025-12-20",
                "end": "2026-01-04",
                "regions": ["north", "south"],
            },
            {
                "name": "Voorjaarsvakantie",
                "start": "2026-02-14",
                "end": "2026-02-22",
                "regions": ["south"],
            },
        ],
        "regions": [
            {"id": "north", "name": "Noord"},
            {"id": "south", "name": "Zuid"},
        ],
    }


@pytest.fixture
def bundle(bundle_data):
    return ExportBundle.model_validate(bundle_data)


@pytest.fixture
def reference_day():
    return date(2025, 3, 20)
