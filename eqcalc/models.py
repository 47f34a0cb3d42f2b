"""Pydantic models for equipment, catalogs, requests and search results.

These are the FastAPI-ready schemas; keep field names stable.
"""
from enum import Enum, unique
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from eqcalc.constants import EMPTY_ITEM_NAME
from eqcalc.elements import Element
from eqcalc.errors import CatalogContractError, SearchFailure


@unique
class Slot(str, Enum):
    WEAPON    = "weapon"
    ARMOR     = "armor"
    SHIELD    = "shield"
    HELMET    = "helmet"
    ACCESSORY = "accessory"


# Search order of the optimizer
SLOT_ORDER: tuple[Slot, ...] = (Slot.WEAPON, Slot.ARMOR, Slot.SHIELD, Slot.HELMET, Slot.ACCESSORY)


# ---------------------------------------------------------------------------
# Equipment
# ---------------------------------------------------------------------------

class Equipment(BaseModel):
    """One catalog row. Immutable."""
    model_config = ConfigDict(frozen=True)

    ap: int = 0
    vp: int = 0
    hp: int = 0
    mp: int = 0
    weight: int = 0
    ranged: bool = False
    element: Element = Element.NONE
    required_level: int = 0
    name: str

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_EQUIPMENT


EMPTY_EQUIPMENT = Equipment(name=EMPTY_ITEM_NAME)


class ItemRecord(BaseModel):
    """A row of the raw item feed (items_json). Extra columns are ignored."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: str = ""
    typ: str
    ap: int = 0
    vp: int = 0
    hp: int = 0
    mp: int = 0
    kraft: int = 0      # weight
    distanz: int = 0    # > 0 means ranged
    element: int = 0    # bitmask, see elements.decode_element
    blacksmith_level: int = 0
    lang_item: Optional[str] = None


# ---------------------------------------------------------------------------
# Catalog snapshot
# ---------------------------------------------------------------------------

class EquipmentCatalog(BaseModel):
    """The five per-slot catalogs as one immutable, versioned snapshot."""
    model_config = ConfigDict(frozen=True)

    weapons:     tuple[Equipment, ...] = (EMPTY_EQUIPMENT,)
    armor:       tuple[Equipment, ...] = (EMPTY_EQUIPMENT,)
    shields:     tuple[Equipment, ...] = (EMPTY_EQUIPMENT,)
    helmets:     tuple[Equipment, ...] = (EMPTY_EQUIPMENT,)
    accessories: tuple[Equipment, ...] = (EMPTY_EQUIPMENT,)
    version: int = 0
    source: str = ""

    def items(self, slot: Slot) -> tuple[Equipment, ...]:
        return {
            Slot.WEAPON:    self.weapons,
            Slot.ARMOR:     self.armor,
            Slot.SHIELD:    self.shields,
            Slot.HELMET:    self.helmets,
            Slot.ACCESSORY: self.accessories,
        }[slot]

    def check_sentinels(self) -> None:
        """Raise CatalogContractError unless every slot starts with the sentinel."""
        for slot in SLOT_ORDER:
            items = self.items(slot)
            if not items or not items[0].is_empty:
                raise CatalogContractError(
                    f"Catalog v{self.version} slot '{slot.value}' does not start with the empty item"
                )

    def counts(self) -> dict[str, int]:
        """Real item count per slot (sentinel excluded)."""
        return {slot.value: max(len(self.items(slot)) - 1, 0) for slot in SLOT_ORDER}


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class UnitProfile(BaseModel):
    """Search request: unit constraints plus scoring weights. Hashable.

    Ranged-flag consistency is reported by the optimizer, not validated here.
    """
    model_config = ConfigDict(frozen=True)

    carry_weight: int = 0
    element: Element = Element.NONE
    ranged: bool = False
    forge_level: int = 0
    ranged_required: bool = False
    ranged_forbidden: bool = False
    attack_element: Optional[Element] = None
    defense_element: Optional[Element] = None
    ap_weight: int = Field(default=0, ge=0)
    vp_weight: int = Field(default=0, ge=0)
    hp_weight: int = Field(default=0, ge=0)
    mp_weight: int = Field(default=0, ge=0)
    ignored_items: frozenset[str] = frozenset()

    def score(self, ap: int, vp: int, hp: int, mp: int) -> int:
        return ap * self.ap_weight + vp * self.vp_weight + hp * self.hp_weight + mp * self.mp_weight

    def item_score(self, item: Equipment) -> int:
        return self.score(item.ap, item.vp, item.hp, item.mp)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class EquipmentSet(BaseModel):
    """Chosen item per slot (possibly the empty item). Ready as FastAPI response."""
    model_config = ConfigDict(frozen=True)

    weapon: Equipment
    armor: Equipment
    shield: Equipment
    helmet: Equipment
    accessory: Equipment
    score: int

    @property
    def pieces(self) -> tuple[Equipment, ...]:
        return (self.weapon, self.armor, self.shield, self.helmet, self.accessory)

    @computed_field
    @property
    def total_weight(self) -> int:
        return sum(p.weight for p in self.pieces)

    @computed_field
    @property
    def ap(self) -> int:
        return sum(p.ap for p in self.pieces)

    @computed_field
    @property
    def vp(self) -> int:
        return sum(p.vp for p in self.pieces)

    @computed_field
    @property
    def hp(self) -> int:
        return sum(p.hp for p in self.pieces)

    @computed_field
    @property
    def mp(self) -> int:
        return sum(p.mp for p in self.pieces)


class SearchResult(BaseModel):
    """Tagged outcome of one search: exactly one of equipment_set / error."""
    model_config = ConfigDict(frozen=True)

    equipment_set: Optional[EquipmentSet] = None
    error: Optional[SearchFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, equipment_set: EquipmentSet) -> "SearchResult":
        return cls(equipment_set=equipment_set)

    @classmethod
    def failure(cls, error: SearchFailure) -> "SearchResult":
        return cls(error=error)
