"""Tests for catalog construction and candidate filtering (catalog.py)."""
from eqcalc import (
    EMPTY_EQUIPMENT, Element, Equipment, ItemRecord, Slot,
    build_catalog, filter_candidates,
)


def _record(id: int, typ: str, name: str | None, **stats) -> ItemRecord:
    return ItemRecord(id=id, name=f"item{id}", typ=typ, lang_item=name, **stats)


class TestBuildCatalog:
    def test_empty_records_give_sentinel_only_catalog(self) -> None:
        catalog = build_catalog([], version=3, source="test")
        for slot in Slot:
            assert catalog.items(slot) == (EMPTY_EQUIPMENT,)
        assert catalog.version == 3
        assert catalog.source == "test"
        catalog.check_sentinels()

    def test_groups_by_type_and_keeps_feed_order(self) -> None:
        records = [
            _record(1, "Waffe", "Axt", ap=7, kraft=4),
            _record(2, "Helm", "Kappe", vp=1, kraft=1),
            _record(3, "Waffe", "Bogen", ap=5, kraft=3, distanz=2),
            _record(4, "Ring", "Ring", mp=2),
        ]
        catalog = build_catalog(records)
        assert [w.name for w in catalog.weapons] == [EMPTY_EQUIPMENT.name, "Axt", "Bogen"]
        assert [h.name for h in catalog.helmets] == [EMPTY_EQUIPMENT.name, "Kappe"]
        assert catalog.counts() == {
            "weapon": 2, "armor": 0, "shield": 0, "helmet": 1, "accessory": 1,
        }

    def test_maps_feed_columns(self) -> None:
        records = [_record(1, "Schild", "Eisschild", vp=3, hp=8, kraft=6,
                           distanz=0, element=514, blacksmith_level=2)]
        shield = build_catalog(records).shields[1]
        assert shield == Equipment(name="Eisschild", vp=3, hp=8, weight=6, ranged=False,
                                   element=Element.ICE, required_level=2)

    def test_ranged_flag_from_distance(self) -> None:
        catalog = build_catalog([_record(1, "Waffe", "Bogen", distanz=3)])
        assert catalog.weapons[1].ranged is True

    def test_rows_without_display_name_dropped(self) -> None:
        catalog = build_catalog([
            _record(1, "Ruestung", None, vp=50),
            _record(2, "Ruestung", "Leder", vp=5),
        ])
        assert [a.name for a in catalog.armor[1:]] == ["Leder"]

    def test_unknown_types_ignored(self) -> None:
        catalog = build_catalog([_record(1, "Trank", "Heiltrank", hp=10)])
        assert sum(catalog.counts().values()) == 0


class TestFilterCandidates:
    ITEMS = [
        EMPTY_EQUIPMENT,
        Equipment(name="Feuerschwert", element=Element.FIRE, weight=5),
        Equipment(name="Eisaxt", element=Element.ICE, weight=5),
        Equipment(name="Bogen", ranged=True, weight=3),
        Equipment(name="Meisterhammer", required_level=5, weight=8),
        Equipment(name="Amboss", weight=100),
    ]

    def _names(self, items: list[Equipment]) -> list[str]:
        return [i.name for i in items]

    def test_defaults_pass_compatible_items_in_order(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 60, True, 5)
        assert self._names(result) == [
            EMPTY_EQUIPMENT.name, "Feuerschwert", "Eisaxt", "Bogen", "Meisterhammer",
        ]

    def test_element_compatibility(self) -> None:
        result = filter_candidates(self.ITEMS, Element.FIRE, 60, True, 5)
        assert "Eisaxt" not in self._names(result)
        assert "Feuerschwert" in self._names(result)

    def test_forge_level(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 60, True, 4)
        assert "Meisterhammer" not in self._names(result)

    def test_weight_bound_inclusive(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 100, True, 5)
        assert "Amboss" in self._names(result)

    def test_ranged_required(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 60, True, 5, ranged_required=True)
        assert self._names(result) == ["Bogen"]

    def test_ranged_forbidden(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 60, True, 5, ranged_forbidden=True)
        assert "Bogen" not in self._names(result)

    def test_unit_without_ranged_capability(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 60, False, 5)
        assert "Bogen" not in self._names(result)

    def test_wanted_elements(self) -> None:
        result = filter_candidates(self.ITEMS, Element.NONE, 60, True, 5,
                                   wanted_elements=frozenset({Element.ICE}))
        assert self._names(result) == ["Eisaxt"]

    def test_ignored_items_never_drop_sentinel(self) -> None:
        ignored = frozenset({"Bogen", EMPTY_EQUIPMENT.name})
        result = filter_candidates(self.ITEMS, Element.NONE, 60, True, 5, ignored_items=ignored)
        assert self._names(result)[0] == EMPTY_EQUIPMENT.name
        assert "Bogen" not in self._names(result)

    def test_empty_result_is_valid(self) -> None:
        assert filter_candidates([], Element.NONE, 60, True, 5) == []
