"""
Raw item feed loader. HTTP endpoint first, then a local JSON file, then empty.

The optimizer never sees this layer; it only receives the catalog snapshot
built from whatever records were loaded.
"""
import logging
from pathlib import Path
from typing import Optional

import httpx
import orjson
from pydantic import TypeAdapter, ValidationError

from eqcalc.constants import SOURCE_EMPTY, SOURCE_FILE, SOURCE_HTTP
from eqcalc.models import ItemRecord

log = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[ItemRecord])

DEFAULT_ITEMS_FILE = Path(__file__).parent / "resources" / "items.json"


class EquipmentDataSource:
    """Loads item records with the HTTP -> local file -> empty fallback chain."""

    ITEMS_PATH = "/item/items_json"

    def __init__(self, base_url: str = "http://localhost", port: int = 8080,
                 items_file: Path | None = None, timeout: float = 10.0,
                 client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.port = port
        self.items_file = items_file or DEFAULT_ITEMS_FILE
        self.timeout = timeout
        self._client = client

    @property
    def items_url(self) -> str:
        if self.base_url.startswith("https://"):
            return f"{self.base_url}{self.ITEMS_PATH}"
        return f"{self.base_url}:{self.port}{self.ITEMS_PATH}"

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def fetch_remote(self) -> list[ItemRecord]:
        log.info("Attempting to load equipment data from: %s", self.items_url)
        if self._client is not None:
            response = self._client.get(self.items_url, timeout=self.timeout)
        else:
            response = httpx.get(self.items_url, timeout=self.timeout)
        response.raise_for_status()
        if not response.content:
            raise ValueError("Empty response from HTTP endpoint")
        records = _RECORDS.validate_python(orjson.loads(response.content))
        log.info("Successfully loaded %d items from HTTP endpoint", len(records))
        return records

    def read_local(self) -> list[ItemRecord]:
        log.info("Loading equipment data from local file: %s", self.items_file)
        records = _RECORDS.validate_python(orjson.loads(self.items_file.read_bytes()))
        log.info("Successfully loaded %d items from local file", len(records))
        return records

    def load(self) -> tuple[list[ItemRecord], str]:
        """Return (records, source label). Never raises on source failures."""
        try:
            return self.fetch_remote(), SOURCE_HTTP
        except (httpx.HTTPError, httpx.InvalidURL, orjson.JSONDecodeError, ValidationError,
                ValueError) as e:
            log.warning("Failed to load equipment data from HTTP endpoint: %s", e)
            log.info("Falling back to local JSON file...")
        try:
            return self.read_local(), SOURCE_FILE
        except (OSError, orjson.JSONDecodeError, ValidationError) as e:
            log.error("Failed to load equipment data from fallback file: %s", e)
        log.error("Initializing empty equipment catalog due to loading failures")
        return [], SOURCE_EMPTY
