"""Composition root: the single place where all wiring happens.

``build_runtime()`` constructs the store, the catalog cache, the background
refresher and the AdService once; callers own the returned ``AdServerRuntime``
and pass its parts explicitly. There is no module-level cache instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .adapters.sqlite_catalog_store import SQLiteCatalogStore
from .config.runtime import RuntimeSettings, get_settings
from .services.ad_service import AdService
from .services.catalog_cache import CatalogCache
from .services.refresher import CatalogRefresher
from .services.seeding import seed_from_file

logger = logging.getLogger(__name__)


@dataclass
class AdServerRuntime:
    """Everything the serving process owns, with a single teardown point."""

    settings: RuntimeSettings
    store: SQLiteCatalogStore
    cache: CatalogCache
    refresher: CatalogRefresher
    service: AdService

    def close(self) -> None:
        self.refresher.stop()
        self.store.close()


def build_cache(settings: RuntimeSettings | None = None) -> tuple[SQLiteCatalogStore, CatalogCache]:
    """Open the store and load the first snapshot. Raises if the store is unusable."""
    settings = settings or get_settings()
    store = SQLiteCatalogStore(settings.catalog_db_path)
    cache = CatalogCache(store)
    try:
        cache.initialize()
    except Exception:
        store.close()
        raise
    return store, cache


def build_runtime(
    settings: RuntimeSettings | None = None,
    *,
    start_refresher: bool = True,
) -> AdServerRuntime:
    """Construct the full runtime with real adapters."""
    settings = settings or get_settings()
    store, cache = build_cache(settings)
    if settings.seed_on_startup:
        path = Path(settings.sample_catalog_path) if settings.sample_catalog_path else None
        seed_from_file(cache, path)
    refresher = CatalogRefresher(cache, interval_seconds=settings.refresh_interval_seconds)
    if start_refresher:
        refresher.start()
    logger.info(
        "runtime_ready",
        extra={"db_path": settings.catalog_db_path, **cache.counts()},
    )
    return AdServerRuntime(
        settings=settings,
        store=store,
        cache=cache,
        refresher=refresher,
        service=AdService(cache),
    )
