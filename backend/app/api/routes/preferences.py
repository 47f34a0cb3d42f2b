"""Persisted user preferences: forge level and ignored items."""
from fastapi import APIRouter

from app.api.deps import PreferenceStoreDep
from eqcalc.preferences import Preferences

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/", response_model=Preferences)
def get_preferences(store: PreferenceStoreDep) -> Preferences:
    return store.preferences


@router.put("/", response_model=Preferences)
def update_preferences(preferences: Preferences, store: PreferenceStoreDep) -> Preferences:
    return store.update(preferences)


@router.post("/ignored/{item_name}", response_model=Preferences)
def add_ignored_item(item_name: str, store: PreferenceStoreDep) -> Preferences:
    store.add_ignored(item_name)
    return store.preferences


@router.delete("/ignored/{item_name}", response_model=Preferences)
def remove_ignored_item(item_name: str, store: PreferenceStoreDep) -> Preferences:
    store.remove_ignored(item_name)
    return store.preferences


@router.delete("/ignored", response_model=Preferences)
def clear_ignored_items(store: PreferenceStoreDep) -> Preferences:
    store.clear_ignored()
    return store.preferences
