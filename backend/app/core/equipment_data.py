"""Catalog and preference store singletons, created once and shared across requests."""
from functools import lru_cache

from app.core.config import settings
from eqcalc import CatalogStore, EquipmentDataSource, PreferenceStore


@lru_cache(maxsize=1)
def get_catalog_store() -> CatalogStore:
    data_source = EquipmentDataSource(
        base_url=settings.EQUIPMENT_JSON_URL,
        port=settings.SERVER_PORT,
        items_file=settings.ITEMS_FILE,
        timeout=settings.HTTP_TIMEOUT,
    )
    return CatalogStore(data_source, cache_size=settings.RESULT_CACHE_SIZE)


@lru_cache(maxsize=1)
def get_preference_store() -> PreferenceStore:
    return PreferenceStore(settings.PREFERENCES_DIR)
