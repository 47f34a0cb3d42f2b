"""Equipment set optimizer: exhaustive depth-first search with pruning."""
import logging
from collections.abc import Sequence
from typing import Optional

from eqcalc.catalog import filter_candidates
from eqcalc.constants import MAX_WEIGHT_BONUS
from eqcalc.elements import (
    combine, is_compatible, is_valid_element_combination,
    wanted_defense_elements, wanted_elements,
)
from eqcalc.errors import SearchFailure
from eqcalc.models import (
    Equipment, EquipmentCatalog, EquipmentSet, SearchResult, Slot, UnitProfile,
)

log = logging.getLogger(__name__)


class EquipmentOptimizer:
    """Finds the best-scoring equipment set for a unit profile."""

    def __init__(self, max_weight_bonus: int = MAX_WEIGHT_BONUS):
        self.max_weight_bonus = max_weight_bonus

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def search(self, profile: UnitProfile, catalog: EquipmentCatalog) -> SearchResult:
        """Best set for profile, or the domain failure explaining why there is none.

        Raises CatalogContractError if the catalog lacks its empty items.
        """
        failure = self.precheck(profile)
        if failure is not None:
            return SearchResult.failure(failure)

        catalog.check_sentinels()
        candidates = self.candidates(profile, catalog)
        best = self._enumerate(profile, candidates)
        if best is None:
            log.warning(
                "Unable to find item combination for parameters element=%s carry_weight=%d "
                "ranged=%s ranged_required=%s ranged_forbidden=%s forge_level=%d "
                "attack=%s defense=%s (catalog v%d)",
                profile.element.value, profile.carry_weight, profile.ranged,
                profile.ranged_required, profile.ranged_forbidden, profile.forge_level,
                profile.attack_element, profile.defense_element, catalog.version,
            )
            return SearchResult.failure(SearchFailure.invalid_combination())
        return SearchResult.success(best)

    def precheck(self, profile: UnitProfile) -> Optional[SearchFailure]:
        """Input checks done before any catalog is scanned."""
        if (profile.ranged_required and profile.ranged_forbidden) or \
                (profile.ranged_required and not profile.ranged):
            log.warning(
                "Invalid ranged parameters. Unit can use ranged weapons: %s | "
                "ranged_required: %s | ranged_forbidden: %s",
                profile.ranged, profile.ranged_required, profile.ranged_forbidden,
            )
            return SearchFailure.invalid_combination()
        if not is_valid_element_combination(
                profile.element, profile.attack_element, profile.defense_element):
            log.warning("Invalid element combination %s, %s and %s",
                        profile.element, profile.attack_element, profile.defense_element)
            return SearchFailure.element_mismatch()
        return None

    def candidates(self, profile: UnitProfile,
                   catalog: EquipmentCatalog) -> dict[Slot, list[Equipment]]:
        """Per-slot filtered candidate lists (slack weight bound)."""
        max_weight = profile.carry_weight + self.max_weight_bonus
        defense_wanted = wanted_defense_elements(profile.element, profile.defense_element)

        def _filter(slot: Slot, wanted=frozenset(), ranged_policy: bool = False):
            return filter_candidates(
                catalog.items(slot), profile.element, max_weight, profile.ranged,
                profile.forge_level, wanted,
                ranged_required=ranged_policy and profile.ranged_required,
                ranged_forbidden=ranged_policy and profile.ranged_forbidden,
                ignored_items=profile.ignored_items,
            )

        return {
            Slot.WEAPON: _filter(
                Slot.WEAPON, wanted_elements(profile.element, profile.attack_element), True),
            Slot.ARMOR:     _filter(Slot.ARMOR, defense_wanted),
            Slot.SHIELD:    _filter(Slot.SHIELD, defense_wanted),
            Slot.HELMET:    _filter(Slot.HELMET),
            Slot.ACCESSORY: _filter(Slot.ACCESSORY),
        }

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _enumerate(self, profile: UnitProfile,
                   candidates: dict[Slot, list[Equipment]]) -> Optional[EquipmentSet]:
        weapons     = candidates[Slot.WEAPON]
        armors      = candidates[Slot.ARMOR]
        shields     = candidates[Slot.SHIELD]
        helmets     = candidates[Slot.HELMET]
        accessories = candidates[Slot.ACCESSORY]
        if not all((weapons, armors, shields, helmets, accessories)):
            return None

        unit = profile.element
        budget = profile.carry_weight
        slack = budget + self.max_weight_bonus
        attack = profile.attack_element
        defense = profile.defense_element
        item_score = profile.item_score

        # Lightest / best completion of the slots after index i
        ordered = (weapons, armors, shields, helmets, accessories)
        min_rest = _suffix_sums([min(i.weight for i in items) for items in ordered])
        max_rest = _suffix_sums([max(item_score(i) for i in items) for items in ordered])

        best: Optional[tuple[int, tuple[Equipment, ...]]] = None
        evaluated = 0

        def hopeless(weight: int, score: int, depth: int) -> bool:
            if weight + min_rest[depth] > budget:
                return True
            return best is not None and score + max_rest[depth] <= best[0]

        for weapon in weapons:
            if attack is not None and combine(unit, weapon.element) is not attack:
                continue
            w1, s1 = weapon.weight, item_score(weapon)
            if hopeless(w1, s1, 1):
                continue
            for armor in armors:
                w2, s2 = w1 + armor.weight, s1 + item_score(armor)
                if w2 > slack or not is_compatible(unit, weapon.element, armor.element):
                    continue
                if hopeless(w2, s2, 2):
                    continue
                for shield in shields:
                    w3, s3 = w2 + shield.weight, s2 + item_score(shield)
                    if w3 > slack or not is_compatible(
                            unit, weapon.element, armor.element, shield.element):
                        continue
                    if defense is not None and \
                            combine(unit, armor.element, shield.element) is not defense:
                        continue
                    if hopeless(w3, s3, 3):
                        continue
                    for helmet in helmets:
                        w4, s4 = w3 + helmet.weight, s3 + item_score(helmet)
                        if w4 > slack or not is_compatible(
                                unit, weapon.element, armor.element,
                                shield.element, helmet.element):
                            continue
                        if hopeless(w4, s4, 4):
                            continue
                        for accessory in accessories:
                            w5, s5 = w4 + accessory.weight, s4 + item_score(accessory)
                            if w5 > budget or not is_compatible(
                                    unit, weapon.element, armor.element, shield.element,
                                    helmet.element, accessory.element):
                                continue
                            evaluated += 1
                            if best is None or s5 > best[0]:
                                best = (s5, (weapon, armor, shield, helmet, accessory))

        log.debug("Evaluated %d complete sets", evaluated)
        if best is None:
            return None
        score, (weapon, armor, shield, helmet, accessory) = best
        return EquipmentSet(weapon=weapon, armor=armor, shield=shield,
                            helmet=helmet, accessory=accessory, score=score)


def _suffix_sums(values: Sequence[int]) -> list[int]:
    """out[i] = sum(values[i:]); out[len(values)] = 0."""
    out = [0] * (len(values) + 1)
    for i in range(len(values) - 1, -1, -1):
        out[i] = out[i + 1] + values[i]
    return out
