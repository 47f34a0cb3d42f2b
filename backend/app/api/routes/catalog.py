"""Catalog maintenance and inspection endpoints."""
from typing import Any

from fastapi import APIRouter

from app.api.deps import CatalogStoreDep
from eqcalc.models import Equipment, Slot

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.post("/refresh")
def refresh_catalog(store: CatalogStoreDep) -> dict[str, Any]:
    """Reload the item feed and publish it as a new catalog snapshot."""
    catalog = store.refresh()
    return {
        "version": catalog.version,
        "source": catalog.source,
        "counts": catalog.counts(),
    }


@router.get("/stats")
def get_catalog_stats(store: CatalogStoreDep) -> dict[str, Any]:
    """Item counts per slot (empty item excluded), data source and snapshot version."""
    return store.stats()


@router.get("/{slot}", response_model=list[Equipment])
def get_slot_items(slot: Slot, store: CatalogStoreDep) -> list[Equipment]:
    """All items of one slot in catalog order, without the empty item."""
    return list(store.catalog.items(slot)[1:])
