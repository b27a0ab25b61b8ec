"""Composition root and CLI tests."""

import json

from adserver.cli import main as cli_main
from adserver.config.runtime import RuntimeSettings
from adserver.models import AdRequest, ServeStatus
from adserver.wiring import build_runtime


def _settings(tmp_path, **overrides) -> RuntimeSettings:
    values = {"catalog_db_path": str(tmp_path / "catalog.db")}
    values.update(overrides)
    return RuntimeSettings(_env_file=None, **values)


def test_build_runtime_with_seed(tmp_path):
    runtime = build_runtime(_settings(tmp_path, seed_on_startup=True), start_refresher=False)
    try:
        assert not runtime.refresher.is_running
        outcome = runtime.service.serve_ad(AdRequest(placement_id="adunit2", user_id="u"))
        assert outcome.status is ServeStatus.served
        assert outcome.response.creative_id == "creative2"
        assert outcome.response.price == 3.0
    finally:
        runtime.close()


def test_build_runtime_starts_refresher(tmp_path):
    runtime = build_runtime(_settings(tmp_path, refresh_interval_seconds=60))
    try:
        assert runtime.refresher.is_running
        assert runtime.refresher.interval_seconds == 60
    finally:
        runtime.close()
    assert not runtime.refresher.is_running


def test_restart_reuses_persisted_catalog(tmp_path):
    first = build_runtime(_settings(tmp_path, seed_on_startup=True), start_refresher=False)
    first.close()
    second = build_runtime(_settings(tmp_path, seed_on_startup=True), start_refresher=False)
    try:
        assert second.cache.counts() == {"placements": 3, "creatives": 2}
    finally:
        second.close()


def test_cli_seed_add_and_list(tmp_path, capsys):
    db = str(tmp_path / "cli.db")
    assert cli_main(["--db", db, "init"]) == 0
    assert cli_main(["--db", db, "seed"]) == 0
    assert cli_main(
        ["--db", db, "add-creative", "cr-9", "--format", "banner", "--width", "300", "--height", "250", "--price", "9"]
    ) == 0
    capsys.readouterr()

    assert cli_main(["--db", db, "list"]) == 0
    listing = json.loads(capsys.readouterr().out)
    assert [c["creative_id"] for c in listing["creatives"]] == ["creative1", "creative2", "cr-9"]


def test_cli_duplicate_placement_fails(tmp_path, capsys):
    db = str(tmp_path / "cli.db")
    args = ["--db", db, "add-placement", "p1", "--format", "video", "--width", "10", "--height", "10"]
    assert cli_main(args) == 0
    assert cli_main(args) == 1
    assert "already exists" in capsys.readouterr().out


def test_cli_without_command_prints_help(capsys):
    assert cli_main([]) == 1
