"""Port: durable store for placements and creatives."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import AdPlacement, Creative


@runtime_checkable
class CatalogStorePort(Protocol):
    """Insert and full-scan interface over the catalog tables.

    Inserts raise ``DuplicateKeyError`` on an existing id and
    ``StoreUnavailableError`` on any other failure; loads raise
    ``StoreUnavailableError``.
    """

    def create_schema(self) -> None: ...

    def insert_placement(self, placement: AdPlacement) -> None: ...

    def insert_creative(self, creative: Creative) -> None: ...

    def load_all_placements(self) -> list[AdPlacement]: ...

    def load_all_creatives(self) -> list[Creative]: ...
