"""Catalog construction from the raw item feed and per-slot candidate filtering."""
import logging
from collections.abc import Iterable, Sequence

import pandas as pd

from eqcalc.constants import ITEM_TYPE_TO_SLOT
from eqcalc.elements import Element, decode_element, is_compatible
from eqcalc.models import EMPTY_EQUIPMENT, Equipment, EquipmentCatalog, ItemRecord, Slot

log = logging.getLogger(__name__)

_ITEM_COLUMNS = [
    "id", "typ", "ap", "vp", "hp", "mp", "kraft", "distanz",
    "element", "blacksmith_level", "lang_item",
]


def _row_to_equipment(row) -> Equipment:
    return Equipment(
        ap=int(row.ap),
        vp=int(row.vp),
        hp=int(row.hp),
        mp=int(row.mp),
        weight=int(row.kraft),
        ranged=bool(row.distanz > 0),
        element=decode_element(int(row.element)),
        required_level=int(row.blacksmith_level),
        name=str(row.lang_item),
    )


def build_catalog(records: Iterable[ItemRecord], version: int = 0,
                  source: str = "") -> EquipmentCatalog:
    """Group feed rows by item type (feed order kept) and prepend the empty item.

    Rows without a display name (lang_item) and unknown item types are dropped.
    """
    frame = pd.DataFrame(
        [r.model_dump(include=set(_ITEM_COLUMNS)) for r in records],
        columns=_ITEM_COLUMNS,
    )
    frame = frame[frame["lang_item"].notna()]

    per_slot: dict[Slot, list[Equipment]] = {slot: [EMPTY_EQUIPMENT] for slot in Slot}
    for typ, group in frame.groupby("typ", sort=False):
        slot_key = ITEM_TYPE_TO_SLOT.get(typ)
        if slot_key is None:
            log.debug("Skipping %d rows of unknown item type %r", len(group), typ)
            continue
        per_slot[Slot(slot_key)].extend(
            _row_to_equipment(row) for row in group.itertuples(index=False))

    catalog = EquipmentCatalog(
        weapons=tuple(per_slot[Slot.WEAPON]),
        armor=tuple(per_slot[Slot.ARMOR]),
        shields=tuple(per_slot[Slot.SHIELD]),
        helmets=tuple(per_slot[Slot.HELMET]),
        accessories=tuple(per_slot[Slot.ACCESSORY]),
        version=version,
        source=source,
    )
    log.info("Built catalog v%d from %s: %s", version, source or "records", catalog.counts())
    return catalog


def filter_candidates(
    catalog: Sequence[Equipment],
    unit_element: Element,
    max_weight: int,
    unit_ranged: bool,
    forge_level: int,
    wanted_elements: frozenset[Element] = frozenset(),
    ranged_required: bool = False,
    ranged_forbidden: bool = False,
    ignored_items: frozenset[str] = frozenset(),
) -> list[Equipment]:
    """Items of one slot the unit may equip, in catalog order."""
    return [
        item for item in catalog
        if is_compatible(unit_element, item.element)
        and forge_level >= item.required_level
        and max_weight >= item.weight
        and not (ranged_required and not item.ranged)
        and not (ranged_forbidden and item.ranged)
        and (unit_ranged or not item.ranged)
        and (not wanted_elements or item.element in wanted_elements)
        and (item.is_empty or item.name not in ignored_items)
    ]
