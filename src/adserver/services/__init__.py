"""Application services."""

from .ad_service import AdService
from .catalog_cache import CatalogCache
from .locking import ReadWriteLock
from .refresher import CatalogRefresher

__all__ = ["AdService", "CatalogCache", "CatalogRefresher", "ReadWriteLock"]
