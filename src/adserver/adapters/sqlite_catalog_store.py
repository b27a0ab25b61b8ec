"""Adapter: SQLite-backed catalog store implementing CatalogStorePort."""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path

from pydantic import ValidationError

from ..errors import DuplicateKeyError, StoreUnavailableError
from ..models import AdPlacement, Creative

logger = logging.getLogger(__name__)

_MEMORY_PATH = ":memory:"


class SQLiteCatalogStore:
    """Concrete CatalogStorePort backed by a single SQLite file.

    One connection is shared by every thread; statements are serialized by
    ``self._lock``. Uniqueness is enforced by the primary keys, so duplicate
    inserts are detected from the constraint violation rather than a
    pre-check.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._lock = threading.Lock()
        self._schema_ready = False
        self._ensure_parent_dir()
        try:
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StoreUnavailableError("connect", str(exc)) from exc
        self._conn.row_factory = sqlite3.Row

    @property
    def db_path(self) -> str:
        return self._db_path

    def _ensure_parent_dir(self) -> None:
        if self._db_path == _MEMORY_PATH:
            return
        path = Path(self._db_path)
        if path.parent.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def create_schema(self) -> None:
        with self._lock:
            if self._schema_ready:
                return
            try:
                with self._conn:
                    self._conn.execute(
                        """
                        CREATE TABLE IF NOT EXISTS AdUnits (
                            ID TEXT PRIMARY KEY,
                            Format TEXT,
                            Width INT,
                            Height INT
                        )
                        """
                    )
                    self._conn.execute(
                        """
                        CREATE TABLE IF NOT EXISTS Creatives (
                            ID TEXT PRIMARY KEY,
                            Format TEXT,
                            Width INT,
                            Height INT,
                            Content TEXT,
                            Price REAL
                        )
                        """
                    )
            except sqlite3.Error as exc:
                raise StoreUnavailableError("create_schema", str(exc)) from exc
            self._schema_ready = True
        logger.debug("catalog_schema_ready", extra={"db_path": self._db_path})

    # ------------------------------------------------------------------
    # Inserts
    # ------------------------------------------------------------------

    def insert_placement(self, placement: AdPlacement) -> None:
        self._insert(
            "placement",
            placement.placement_id,
            "INSERT INTO AdUnits (ID, Format, Width, Height) VALUES (?, ?, ?, ?)",
            (placement.placement_id, placement.format.value, placement.width, placement.height),
        )

    def insert_creative(self, creative: Creative) -> None:
        self._insert(
            "creative",
            creative.creative_id,
            """
            INSERT INTO Creatives (ID, Format, Width, Height, Content, Price)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                creative.creative_id,
                creative.format.value,
                creative.width,
                creative.height,
                creative.content,
                creative.price,
            ),
        )

    def _insert(self, entity: str, key: str, sql: str, params: tuple) -> None:
        with self._lock:
            try:
                with self._conn:
                    self._conn.execute(sql, params)
            except sqlite3.IntegrityError as exc:
                raise DuplicateKeyError(entity, key) from exc
            except sqlite3.Error as exc:
                raise StoreUnavailableError(f"insert {entity} {key!r}", str(exc)) from exc

    # ------------------------------------------------------------------
    # Full scans
    # ------------------------------------------------------------------

    def load_all_placements(self) -> list[AdPlacement]:
        rows = self._fetch_all(
            "load placements",
            "SELECT ID, Format, Width, Height FROM AdUnits ORDER BY rowid",
        )
        try:
            return [
                AdPlacement(
                    placement_id=row["ID"],
                    format=row["Format"],
                    width=row["Width"],
                    height=row["Height"],
                )
                for row in rows
            ]
        except ValidationError as exc:
            raise StoreUnavailableError("load placements", f"invalid row: {exc}") from exc

    def load_all_creatives(self) -> list[Creative]:
        rows = self._fetch_all(
            "load creatives",
            "SELECT ID, Format, Width, Height, Content, Price FROM Creatives ORDER BY rowid",
        )
        try:
            return [
                Creative(
                    creative_id=row["ID"],
                    format=row["Format"],
                    width=row["Width"],
                    height=row["Height"],
                    content=row["Content"] or "",
                    price=row["Price"],
                )
                for row in rows
            ]
        except ValidationError as exc:
            raise StoreUnavailableError("load creatives", f"invalid row: {exc}") from exc

    def _fetch_all(self, operation: str, sql: str) -> list[sqlite3.Row]:
        with self._lock:
            try:
                return self._conn.execute(sql).fetchall()
            except sqlite3.Error as exc:
                raise StoreUnavailableError(operation, str(exc)) from exc

    def close(self) -> None:
        with self._lock:
            self._conn.close()
