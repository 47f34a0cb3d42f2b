"""Application settings, read once from environment variables."""
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    PROJECT_NAME: str = "Equipment Calculator"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Item feed: {EQUIPMENT_JSON_URL}[:{SERVER_PORT}]/item/items_json
    EQUIPMENT_JSON_URL: str = "http://localhost"
    SERVER_PORT: int = 8080
    HTTP_TIMEOUT: float = 10.0
    ITEMS_FILE: Path | None = None  # None = bundled eqcalc/resources/items.json
    LOAD_ON_STARTUP: bool = True

    RESULT_CACHE_SIZE: int = 256
    PREFERENCES_DIR: Path = Path("data")
    BACKEND_CORS_ORIGINS: list[str] = ["*"]


def _settings_from_env() -> Settings:
    values: dict[str, object] = {
        name: os.environ[name] for name in Settings.model_fields if name in os.environ
    }
    origins = values.get("BACKEND_CORS_ORIGINS")
    if isinstance(origins, str):
        values["BACKEND_CORS_ORIGINS"] = [o.strip() for o in origins.split(",") if o.strip()]
    return Settings.model_validate(values)


settings = _settings_from_env()
