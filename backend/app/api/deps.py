from typing import Annotated

from fastapi import Depends

from app.core.equipment_data import get_catalog_store, get_preference_store
from eqcalc import CatalogStore, PreferenceStore

CatalogStoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]
PreferenceStoreDep = Annotated[PreferenceStore, Depends(get_preference_store)]
