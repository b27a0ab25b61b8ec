"""Concrete adapters for the catalog ports."""

from .sqlite_catalog_store import SQLiteCatalogStore

__all__ = ["SQLiteCatalogStore"]
