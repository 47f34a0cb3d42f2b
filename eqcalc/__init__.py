"""eqcalc — equipment set optimizer for game units."""

from eqcalc.elements import (
    Element,
    combine, is_compatible, is_valid_element_combination,
    wanted_elements, wanted_defense_elements, decode_element,
)
from eqcalc.errors import (
    ErrorKind, SearchFailure,
    EquipmentError, ElementConflictError, CatalogContractError,
)
from eqcalc.models import (
    Slot, SLOT_ORDER,
    Equipment, EMPTY_EQUIPMENT, ItemRecord,
    EquipmentCatalog,
    UnitProfile,
    EquipmentSet, SearchResult,
)
from eqcalc.catalog import build_catalog, filter_candidates
from eqcalc.optimizer import EquipmentOptimizer
from eqcalc.data import EquipmentDataSource
from eqcalc.store import CatalogStore
from eqcalc.preferences import Preferences, PreferenceStore

__all__ = [
    # Element algebra
    "Element", "combine", "is_compatible", "is_valid_element_combination",
    "wanted_elements", "wanted_defense_elements", "decode_element",
    # Outcomes / errors
    "ErrorKind", "SearchFailure",
    "EquipmentError", "ElementConflictError", "CatalogContractError",
    # Models
    "Slot", "SLOT_ORDER",
    "Equipment", "EMPTY_EQUIPMENT", "ItemRecord",
    "EquipmentCatalog", "UnitProfile",
    "EquipmentSet", "SearchResult",
    # Catalog
    "build_catalog", "filter_candidates",
    # Optimizer
    "EquipmentOptimizer",
    # Data / store
    "EquipmentDataSource", "CatalogStore",
    # Persistence
    "Preferences", "PreferenceStore",
]
