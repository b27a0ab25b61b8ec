"""RuntimeSettings tests."""

import pytest
from pydantic import ValidationError

from adserver.config.runtime import McpMode, RuntimeSettings


def test_defaults(monkeypatch):
    for key in ("ADSERVER_CATALOG_DB_PATH", "ADSERVER_REFRESH_INTERVAL_SECONDS", "ADSERVER_MCP_MODE"):
        monkeypatch.delenv(key, raising=False)
    settings = RuntimeSettings(_env_file=None)
    assert settings.refresh_interval_seconds == 300.0
    assert settings.catalog_db_path == "data/catalog.db"
    assert settings.mcp_mode is McpMode.serve
    assert settings.seed_on_startup is False


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ADSERVER_CATALOG_DB_PATH", "/tmp/x.db")
    monkeypatch.setenv("ADSERVER_REFRESH_INTERVAL_SECONDS", "12.5")
    monkeypatch.setenv("ADSERVER_MCP_MODE", "admin")
    settings = RuntimeSettings(_env_file=None)
    assert settings.catalog_db_path == "/tmp/x.db"
    assert settings.refresh_interval_seconds == 12.5
    assert settings.mcp_mode is McpMode.admin


def test_rejects_non_positive_interval():
    with pytest.raises(ValidationError):
        RuntimeSettings(_env_file=None, refresh_interval_seconds=0)


def test_log_level_normalized_and_validated():
    assert RuntimeSettings(_env_file=None, log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        RuntimeSettings(_env_file=None, log_level="chatty")
