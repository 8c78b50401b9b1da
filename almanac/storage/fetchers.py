"""Year data fetchers for the day data store."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol

import aiohttp

from almanac.exceptions import DayDataError

logger = logging.getLogger(__name__)


class YearFetcher(Protocol):
    """Fetches the raw day data document for one year."""

    async def fetch(self, year: int) -> Any:
        """Return the decoded JSON document for ``year``.

        Raises:
            DayDataError: If the document is unavailable or not JSON.
        """
        ...


class HttpYearFetcher:
    """Fetches ``{base_url}/data/{year}.json`` over HTTP."""

    def __init__(self, base_url: str, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url_for(self, year: int) -> str:
        return f"{self.base_url}/data/{year}.json"

    async def fetch(self, year: int) -> Any:
        url = self.url_for(year)
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise DayDataError(
                            f"Failed to fetch day data: HTTP {response.status} for {url}"
                        )
                    return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise DayDataError(f"Timed out fetching {url}") from e
        except aiohttp.ClientError as e:
            raise DayDataError(f"Failed to fetch {url}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DayDataError(f"Invalid JSON at {url}: {e}") from e


class FileYearFetcher:
    """Reads ``{data_dir}/{year}.json`` from disk."""

    def __init__(self, data_dir: Path):
        self.data_dir = data_dir

    def path_for(self, year: int) -> Path:
        return self.data_dir / f"{year}.json"

    async def fetch(self, year: int) -> Any:
        path = self.path_for(year)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise DayDataError(f"No day data file: {path}") from e
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DayDataError(f"Failed to read {path}: {e}") from e
