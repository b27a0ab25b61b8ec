"""SQLiteCatalogStore adapter tests against a real SQLite file."""

import sqlite3

import pytest

from adserver.adapters.sqlite_catalog_store import SQLiteCatalogStore
from adserver.errors import DuplicateKeyError, StoreUnavailableError
from adserver.models import AdFormat, AdPlacement, Creative


def _store(tmp_path) -> SQLiteCatalogStore:
    store = SQLiteCatalogStore(str(tmp_path / "catalog.db"))
    store.create_schema()
    return store


def _placement(placement_id: str = "slot-1") -> AdPlacement:
    return AdPlacement(placement_id=placement_id, format=AdFormat.banner, width=300, height=250)


def _creative(creative_id: str = "cr-1", price: float = 1.25) -> Creative:
    return Creative(
        creative_id=creative_id,
        format=AdFormat.video,
        width=1000,
        height=700,
        content='<video src="ad.mp4">',
        price=price,
    )


def test_create_schema_is_idempotent(tmp_path):
    store = _store(tmp_path)
    store.create_schema()
    store.create_schema()
    assert store.load_all_placements() == []
    assert store.load_all_creatives() == []
    store.close()


def test_schema_matches_persisted_layout(tmp_path):
    store = _store(tmp_path)
    store.close()
    conn = sqlite3.connect(str(tmp_path / "catalog.db"))
    placement_cols = [row[1] for row in conn.execute("PRAGMA table_info(AdUnits)")]
    creative_cols = [row[1] for row in conn.execute("PRAGMA table_info(Creatives)")]
    conn.close()
    assert placement_cols == ["ID", "Format", "Width", "Height"]
    assert creative_cols == ["ID", "Format", "Width", "Height", "Content", "Price"]


def test_creates_missing_parent_directory(tmp_path):
    db_path = tmp_path / "nested" / "dir" / "catalog.db"
    store = SQLiteCatalogStore(str(db_path))
    store.create_schema()
    assert db_path.exists()
    store.close()


def test_insert_and_load_round_trip(tmp_path):
    store = _store(tmp_path)
    store.insert_placement(_placement())
    store.insert_creative(_creative())
    assert store.load_all_placements() == [_placement()]
    assert store.load_all_creatives() == [_creative()]
    store.close()


def test_rows_survive_reopen(tmp_path):
    store = _store(tmp_path)
    store.insert_creative(_creative(price=0.1))
    store.close()

    reopened = _store(tmp_path)
    loaded = reopened.load_all_creatives()
    assert loaded == [_creative(price=0.1)]
    assert loaded[0].format is AdFormat.video
    reopened.close()


def test_load_preserves_insertion_order(tmp_path):
    store = _store(tmp_path)
    for creative_id in ["c", "a", "b"]:
        store.insert_creative(_creative(creative_id))
    assert [c.creative_id for c in store.load_all_creatives()] == ["c", "a", "b"]
    store.close()


def test_duplicate_placement_raises_duplicate_key(tmp_path):
    store = _store(tmp_path)
    store.insert_placement(_placement())
    with pytest.raises(DuplicateKeyError) as excinfo:
        store.insert_placement(_placement())
    assert excinfo.value.entity == "placement"
    assert excinfo.value.key == "slot-1"
    assert len(store.load_all_placements()) == 1
    store.close()


def test_duplicate_creative_raises_duplicate_key(tmp_path):
    store = _store(tmp_path)
    store.insert_creative(_creative())
    with pytest.raises(DuplicateKeyError):
        store.insert_creative(_creative(price=99.0))
    assert store.load_all_creatives() == [_creative()]
    store.close()


def test_closed_store_raises_store_unavailable(tmp_path):
    store = _store(tmp_path)
    store.close()
    with pytest.raises(StoreUnavailableError):
        store.load_all_placements()
    with pytest.raises(StoreUnavailableError):
        store.load_all_creatives()
    with pytest.raises(StoreUnavailableError):
        store.insert_placement(_placement())


def test_invalid_stored_row_is_reported_as_store_error(tmp_path):
    store = _store(tmp_path)
    store.close()
    conn = sqlite3.connect(str(tmp_path / "catalog.db"))
    with conn:
        conn.execute("INSERT INTO AdUnits VALUES ('broken', 'billboard', 10, 10)")
    conn.close()

    reopened = _store(tmp_path)
    with pytest.raises(StoreUnavailableError):
        reopened.load_all_placements()
    reopened.close()


def test_in_memory_database_is_supported():
    store = SQLiteCatalogStore(":memory:")
    store.create_schema()
    store.insert_placement(_placement())
    assert len(store.load_all_placements()) == 1
    store.close()


def test_opens_database_written_with_legacy_ddl(tmp_path):
    db_path = tmp_path / "ad.db"
    conn = sqlite3.connect(str(db_path))
    with conn:
        conn.execute("CREATE TABLE IF NOT EXISTS AdUnits (ID TEXT PRIMARY KEY, Format TEXT, Width INT, Height INT)")
        conn.execute(
            "CREATE TABLE IF NOT EXISTS Creatives ("
            "ID TEXT PRIMARY KEY, Format TEXT, Width INT, Height INT, Content TEXT, Price REAL)"
        )
        conn.execute("INSERT INTO AdUnits VALUES ('adunit1', 'banner', 300, 250)")
        conn.execute("INSERT INTO Creatives VALUES ('creative1', 'banner', 300, 250, 'Sample Banner Ad', 1.5)")
    conn.close()

    store = SQLiteCatalogStore(str(db_path))
    store.create_schema()
    assert store.load_all_placements() == [_placement("adunit1")]
    creatives = store.load_all_creatives()
    assert [(c.creative_id, c.content, c.price) for c in creatives] == [("creative1", "Sample Banner Ad", 1.5)]
    with pytest.raises(DuplicateKeyError):
        store.insert_placement(_placement("adunit1"))
    store.close()
