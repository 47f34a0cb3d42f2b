import os
import tempfile
from collections.abc import Generator
from pathlib import Path

os.environ.setdefault("LOAD_ON_STARTUP", "false")
os.environ.setdefault("PREFERENCES_DIR", tempfile.mkdtemp(prefix="eqcalc-prefs-"))

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.equipment_data import get_catalog_store, get_preference_store  # noqa: E402
from app.main import app  # noqa: E402
from eqcalc import (  # noqa: E402
    EMPTY_EQUIPMENT, CatalogStore, Element, Equipment, EquipmentCatalog,
    EquipmentDataSource, PreferenceStore,
)


def _scenario_catalog() -> EquipmentCatalog:
    """Empty item plus one plain item per slot, and one fire weapon."""
    return EquipmentCatalog(
        weapons=(EMPTY_EQUIPMENT, Equipment(name="Schwert", ap=10, weight=5),
                 Equipment(name="Flammenklinge", ap=14, weight=9, element=Element.FIRE)),
        armor=(EMPTY_EQUIPMENT, Equipment(name="Panzer", vp=10, weight=5)),
        shields=(EMPTY_EQUIPMENT, Equipment(name="Schild", hp=5, weight=3)),
        helmets=(EMPTY_EQUIPMENT, Equipment(name="Helm", mp=5, weight=2)),
        accessories=(EMPTY_EQUIPMENT, Equipment(name="Ring", ap=3, weight=1)),
        version=1,
        source="test",
    )


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def catalog_store() -> Generator[CatalogStore, None, None]:
    """Store holding the scenario catalog; its feed is offline so refresh uses the bundled file."""
    offline = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(503)))
    store = CatalogStore(EquipmentDataSource(client=offline))
    store.publish(_scenario_catalog())
    app.dependency_overrides[get_catalog_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_catalog_store, None)


@pytest.fixture
def preference_store(tmp_path: Path) -> Generator[PreferenceStore, None, None]:
    store = PreferenceStore(tmp_path)
    app.dependency_overrides[get_preference_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_preference_store, None)
