"""Catalog store: publishes immutable catalog snapshots and caches results per snapshot.

The current snapshot and its results cache live in one _StoreState object that
is replaced by a single assignment. A search reads the state once, so it keeps
working on a consistent snapshot even while a refresh publishes a new one.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from eqcalc.catalog import build_catalog
from eqcalc.data import EquipmentDataSource
from eqcalc.models import EquipmentCatalog, SearchResult, UnitProfile
from eqcalc.optimizer import EquipmentOptimizer

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _StoreState:
    catalog: EquipmentCatalog
    results: dict[UnitProfile, SearchResult] = field(default_factory=dict)


class CatalogStore:
    """Holds the current EquipmentCatalog and answers searches against it."""

    def __init__(self, data_source: Optional[EquipmentDataSource] = None,
                 optimizer: Optional[EquipmentOptimizer] = None,
                 cache_size: int = 256):
        self.data_source = data_source
        self.optimizer = optimizer or EquipmentOptimizer()
        self.cache_size = cache_size
        self._refresh_lock = threading.Lock()
        self._cache_lock = threading.Lock()
        self._state = _StoreState(EquipmentCatalog())

    @property
    def catalog(self) -> EquipmentCatalog:
        return self._state.catalog

    # ------------------------------------------------------------------
    # Snapshot publication
    # ------------------------------------------------------------------

    def publish(self, catalog: EquipmentCatalog) -> None:
        """Swap in a new snapshot; cached results of the old one are dropped."""
        catalog.check_sentinels()
        self._state = _StoreState(catalog)
        log.info("Published catalog v%d (%s)", catalog.version, catalog.source or "manual")

    def refresh(self) -> EquipmentCatalog:
        """Reload records from the data source and publish them as the next version."""
        if self.data_source is None:
            raise RuntimeError("CatalogStore has no data source to refresh from")
        with self._refresh_lock:
            log.info("Refreshing equipment data...")
            records, source = self.data_source.load()
            catalog = build_catalog(records, version=self.catalog.version + 1, source=source)
            self.publish(catalog)
            return catalog

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search(self, profile: UnitProfile) -> SearchResult:
        state = self._state
        with self._cache_lock:
            cached = state.results.get(profile)
        if cached is not None:
            return cached
        # The search itself runs unlocked; concurrent misses may both compute
        result = self.optimizer.search(profile, state.catalog)
        if self.cache_size <= 0:
            return result
        with self._cache_lock:
            cached = state.results.get(profile)
            if cached is not None:
                return cached
            if len(state.results) >= self.cache_size:
                state.results.pop(next(iter(state.results)))
            state.results[profile] = result
        return result

    def stats(self) -> dict:
        catalog = self.catalog
        counts = catalog.counts()
        return {
            **counts,
            "total": sum(counts.values()),
            "data_source": catalog.source,
            "version": catalog.version,
            "cached_results": len(self._state.results),
        }
