"""User preference persistence (JSON)."""
import logging
import pathlib

import orjson
from pydantic import BaseModel, Field, ValidationError

log = logging.getLogger(__name__)


class Preferences(BaseModel):
    """Settings remembered between sessions."""
    forge_level: int = Field(default=0, ge=0)
    ignored_items: list[str] = Field(default_factory=list)


class PreferenceStore:
    """Persists Preferences to a JSON file."""

    CURRENT_VERSION = 1

    def __init__(self, base_dir: pathlib.Path):
        self.file_path = base_dir / "preferences.json"
        self.preferences = Preferences()
        self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if not self.file_path.exists():
            return
        try:
            raw = orjson.loads(self.file_path.read_bytes())
            if not isinstance(raw, dict):
                log.error("Ignoring preferences file %s: expected an object", self.file_path)
                return
            # v0 files stored the forge level under its in-game name
            if "waffenschmiede" in raw and "forge_level" not in raw:
                raw["forge_level"] = raw.pop("waffenschmiede")
            raw.pop("version", None)
            self.preferences = Preferences.model_validate(raw)
        except (OSError, orjson.JSONDecodeError, ValidationError) as e:
            log.error("Error loading preferences from %s: %s", self.file_path, e)

    def save(self) -> None:
        data = {"version": self.CURRENT_VERSION, **self.preferences.model_dump()}
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def update(self, preferences: Preferences) -> Preferences:
        self.preferences = preferences
        self.save()
        return self.preferences

    def set_forge_level(self, level: int) -> None:
        self.update(self.preferences.model_copy(update={"forge_level": level}))

    def add_ignored(self, item_name: str) -> None:
        if item_name not in self.preferences.ignored_items:
            self.preferences.ignored_items.append(item_name)
            self.save()

    def remove_ignored(self, item_name: str) -> None:
        if item_name in self.preferences.ignored_items:
            self.preferences.ignored_items.remove(item_name)
            self.save()

    def clear_ignored(self) -> None:
        self.preferences.ignored_items.clear()
        self.save()
