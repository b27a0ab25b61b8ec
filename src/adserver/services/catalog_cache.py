"""CatalogCache: in-memory read-through copy of the catalog store."""

from __future__ import annotations

import logging
import threading

from ..errors import CatalogError, NotFoundError
from ..models import AdPlacement, CatalogSnapshot, Creative
from ..ports.catalog_store import CatalogStorePort
from .locking import ReadWriteLock

logger = logging.getLogger(__name__)


class CatalogCache:
    """Holds every placement and creative in memory.

    Reads take the shared side of ``ReadWriteLock``. Writers (inserts and
    refreshes) are serialized end to end by ``_write_mutex`` so a refresh that
    loaded before an insert cannot swap over it, and they take the exclusive
    side only for the in-memory swap or append. Readers always get copies, never
    the internal lists.
    """

    def __init__(self, store: CatalogStorePort) -> None:
        self._store = store
        self._lock = ReadWriteLock()
        self._write_mutex = threading.Lock()
        self._placements: list[AdPlacement] = []
        self._creatives: list[Creative] = []
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Create the schema and build the first snapshot. Raises on failure."""
        self._store.create_schema()
        self.refresh()
        self._initialized = True

    def refresh(self) -> dict[str, int]:
        """Reload both tables and swap them in atomically.

        On failure the previous snapshot is kept and the error propagates.
        """
        with self._write_mutex:
            placements = self._store.load_all_placements()
            creatives = self._store.load_all_creatives()
            with self._lock.write_locked():
                self._placements = list(placements)
                self._creatives = list(creatives)
        counts = {"placements": len(placements), "creatives": len(creatives)}
        logger.info("catalog_refreshed", extra=counts)
        return counts

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert_placement(self, placement: AdPlacement) -> None:
        with self._write_mutex:
            try:
                self._store.insert_placement(placement)
            except CatalogError as exc:
                logger.warning(
                    "placement_insert_failed: %s",
                    exc,
                    extra={"placement_id": placement.placement_id, "error": str(exc)},
                )
                raise
            with self._lock.write_locked():
                self._placements.append(placement)

    def insert_creative(self, creative: Creative) -> None:
        with self._write_mutex:
            try:
                self._store.insert_creative(creative)
            except CatalogError as exc:
                logger.warning(
                    "creative_insert_failed: %s",
                    exc,
                    extra={"creative_id": creative.creative_id, "error": str(exc)},
                )
                raise
            with self._lock.write_locked():
                self._creatives.append(creative)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_placement_by_id(self, placement_id: str) -> AdPlacement:
        with self._lock.read_locked():
            for placement in self._placements:
                if placement.placement_id == placement_id:
                    return placement
        raise NotFoundError("placement", placement_id)

    def get_creative_by_id(self, creative_id: str) -> Creative:
        with self._lock.read_locked():
            for creative in self._creatives:
                if creative.creative_id == creative_id:
                    return creative
        raise NotFoundError("creative", creative_id)

    def get_all_creatives(self) -> list[Creative]:
        """Return a copy of every creative; an empty catalog raises NotFoundError."""
        with self._lock.read_locked():
            creatives = list(self._creatives)
        if not creatives:
            raise NotFoundError("creatives")
        return creatives

    def snapshot(self) -> CatalogSnapshot:
        """Return an immutable copy of both sequences taken under one read lock."""
        with self._lock.read_locked():
            return CatalogSnapshot(tuple(self._placements), tuple(self._creatives))

    def counts(self) -> dict[str, int]:
        with self._lock.read_locked():
            return {"placements": len(self._placements), "creatives": len(self._creatives)}
