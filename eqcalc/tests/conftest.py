"""Shared fixtures for eqcalc unit tests.

Catalogs are built directly from Equipment values without feed parsing. The
"scenario" catalog has the empty item plus one NONE-element, non-ranged item
per slot, weighing 16 in total.
"""
import pytest

from eqcalc import EMPTY_EQUIPMENT, Equipment, EquipmentCatalog, EquipmentOptimizer


def make_catalog(weapons=(), armor=(), shields=(), helmets=(), accessories=(),
                 version: int = 0) -> EquipmentCatalog:
    """Catalog with the empty item prepended to every slot."""
    return EquipmentCatalog(
        weapons=(EMPTY_EQUIPMENT, *weapons),
        armor=(EMPTY_EQUIPMENT, *armor),
        shields=(EMPTY_EQUIPMENT, *shields),
        helmets=(EMPTY_EQUIPMENT, *helmets),
        accessories=(EMPTY_EQUIPMENT, *accessories),
        version=version,
    )


@pytest.fixture(scope="session")
def catalog_factory():
    """make_catalog(), for tests that build their own slot contents."""
    return make_catalog


@pytest.fixture(scope="session")
def scenario_catalog() -> EquipmentCatalog:
    return make_catalog(
        weapons=[Equipment(name="Schwert", ap=10, weight=5)],
        armor=[Equipment(name="Panzer", vp=10, weight=5)],
        shields=[Equipment(name="Schild", hp=5, weight=3)],
        helmets=[Equipment(name="Helm", mp=5, weight=2)],
        accessories=[Equipment(name="Ring", ap=3, weight=1)],
    )


@pytest.fixture(scope="session")
def optimizer() -> EquipmentOptimizer:
    return EquipmentOptimizer()
