"""Equipment set calculation endpoint.

Query parameter names follow the web client (camelCase). Domain failures come
back as HTTP 400 with ``{"kind", "message"}`` so the client can tell an element
mismatch from an impossible combination.
"""
import logging
from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Query

from app.api.deps import CatalogStoreDep
from eqcalc.elements import Element
from eqcalc.errors import CatalogContractError
from eqcalc.models import EquipmentSet, UnitProfile

log = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


@router.get("/", response_model=EquipmentSet)
def calculate(
    store: CatalogStoreDep,
    unit_carry_weight: Annotated[int, Query(alias="unitCarryWeight")] = 0,
    unit_element: Annotated[Element, Query(alias="unitElement")] = Element.NONE,
    unit_ranged: Annotated[bool, Query(alias="unitRanged")] = False,
    forge_level: Annotated[int, Query(alias="waffenschmiede", ge=0)] = 0,
    ranged_required: Annotated[bool, Query(alias="rangedRequired")] = False,
    ranged_forbidden: Annotated[bool, Query(alias="rangedForbidden")] = False,
    element_attack: Annotated[Optional[Element], Query(alias="elementAttack")] = None,
    element_defense: Annotated[Optional[Element], Query(alias="elementDefense")] = None,
    ap_weight: Annotated[int, Query(alias="apWeight", ge=0)] = 0,
    vp_weight: Annotated[int, Query(alias="vpWeight", ge=0)] = 0,
    hp_weight: Annotated[int, Query(alias="hpWeight", ge=0)] = 0,
    mp_weight: Annotated[int, Query(alias="mpWeight", ge=0)] = 0,
    ignored_items: Annotated[list[str] | None, Query(alias="ignoredItems")] = None,
) -> EquipmentSet:
    """Best equipment set for the given unit and stat weighting."""
    profile = UnitProfile(
        carry_weight=unit_carry_weight,
        element=unit_element,
        ranged=unit_ranged,
        forge_level=forge_level,
        ranged_required=ranged_required,
        ranged_forbidden=ranged_forbidden,
        attack_element=element_attack,
        defense_element=element_defense,
        ap_weight=ap_weight,
        vp_weight=vp_weight,
        hp_weight=hp_weight,
        mp_weight=mp_weight,
        ignored_items=frozenset(ignored_items or ()),
    )
    try:
        result = store.search(profile)
    except CatalogContractError as e:
        log.exception("Catalog contract violated while calculating")
        raise HTTPException(
            status_code=500,
            detail={"kind": "CATALOG_CONTRACT", "message": str(e)},
        )
    if result.error is not None:
        raise HTTPException(status_code=400, detail=result.error.model_dump(mode="json"))
    return result.equipment_set
