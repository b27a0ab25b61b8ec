"""Catalog error taxonomy.

Store failures and lookup misses are distinct types so callers can branch on
the kind of failure instead of parsing messages.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all catalog errors."""


class DuplicateKeyError(CatalogError):
    """An entity with the same identifier already exists in the store."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} with id {key!r} already exists")
        self.entity = entity
        self.key = key


class StoreUnavailableError(CatalogError):
    """The durable store could not complete an operation."""

    def __init__(self, operation: str, detail: str = "") -> None:
        message = f"store unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
        self.detail = detail


class NotFoundError(CatalogError):
    """A lookup found nothing. Expected outcome, not a system fault."""

    def __init__(self, entity: str, key: str | None = None) -> None:
        if key is None:
            message = f"no {entity} found in catalog"
        else:
            message = f"{entity} {key!r} not found"
        super().__init__(message)
        self.entity = entity
        self.key = key
