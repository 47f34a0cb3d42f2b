"""Element algebra: compatibility, combination and target pre-filtering.

Every element is a set of base components (NONE is the empty set, FIRE_AIR is
{fire, air}). A group of elements is compatible iff the union of their
components is again the component set of an element; the union is the
combined (resultant) element.
"""
from enum import Enum, unique
from typing import Optional

from eqcalc.constants import ELEMENT_BITS
from eqcalc.errors import ElementConflictError


@unique
class Element(str, Enum):
    NONE      = "NONE"
    FIRE      = "FIRE"
    ICE       = "ICE"
    AIR       = "AIR"
    EARTH     = "EARTH"
    FIRE_AIR  = "FIRE_AIR"
    EARTH_ICE = "EARTH_ICE"


_COMPONENTS: dict[Element, frozenset[str]] = {
    Element.NONE:      frozenset(),
    Element.FIRE:      frozenset({"fire"}),
    Element.ICE:       frozenset({"ice"}),
    Element.AIR:       frozenset({"air"}),
    Element.EARTH:     frozenset({"earth"}),
    Element.FIRE_AIR:  frozenset({"fire", "air"}),
    Element.EARTH_ICE: frozenset({"earth", "ice"}),
}
_BY_COMPONENTS: dict[frozenset[str], Element] = {v: k for k, v in _COMPONENTS.items()}


def components(*elements: Optional[Element]) -> frozenset[str]:
    """Union of base components; None entries (absent targets) are skipped."""
    result: frozenset[str] = frozenset()
    for element in elements:
        if element is not None:
            result |= _COMPONENTS[element]
    return result


def is_compatible(*elements: Optional[Element]) -> bool:
    """True if all given elements may be worn / requested together."""
    return components(*elements) in _BY_COMPONENTS


def combine(*elements: Optional[Element]) -> Element:
    """Resultant element of a compatible group. Raises on incompatible input."""
    union = components(*elements)
    try:
        return _BY_COMPONENTS[union]
    except KeyError:
        raise ElementConflictError(
            f"Cannot combine incompatible elements {[e.value for e in elements if e]}"
        ) from None


def wanted_elements(unit_element: Element,
                    target: Optional[Element]) -> frozenset[Element]:
    """Item elements that, combined with unit_element, give exactly target.

    Empty when no target is requested (no restriction).
    """
    if target is None:
        return frozenset()
    return frozenset(
        e for e in Element
        if is_compatible(unit_element, e) and combine(unit_element, e) is target
    )


def wanted_defense_elements(unit_element: Element,
                            target: Optional[Element]) -> frozenset[Element]:
    """Item elements that can be one half of an armor+shield pair giving target."""
    if target is None:
        return frozenset()
    target_components = _COMPONENTS[target]
    return frozenset(
        e for e in Element
        if _COMPONENTS[e] <= target_components and is_compatible(unit_element, e)
    )


def is_valid_element_combination(unit_element: Element,
                                 attack: Optional[Element] = None,
                                 defense: Optional[Element] = None) -> bool:
    """Check the requested (unit, attack, defense) triple before any search.

    The group must be compatible and every requested target must be reachable,
    i.e. contain the unit's own components.
    """
    if not is_compatible(unit_element, attack, defense):
        return False
    unit_components = _COMPONENTS[unit_element]
    return all(
        unit_components <= _COMPONENTS[target]
        for target in (attack, defense) if target is not None
    )


def decode_element(raw: int) -> Element:
    """Map the raw feed bitmask to an Element."""
    present = {name for name, (weak, strong) in ELEMENT_BITS.items() if raw & (weak | strong)}
    if {"fire", "air"} <= present:
        return Element.FIRE_AIR
    if {"earth", "ice"} <= present:
        return Element.EARTH_ICE
    for name, element in (("fire", Element.FIRE), ("ice", Element.ICE),
                          ("air", Element.AIR), ("earth", Element.EARTH)):
        if name in present:
            return element
    return Element.NONE
