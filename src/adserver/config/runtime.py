"""Pydantic-based runtime settings for the ad server.

Loads from environment variables (with optional .env file).
Invalid values fail fast at startup.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class McpMode(str, Enum):
    serve = "serve"
    admin = "admin"


class RuntimeSettings(BaseSettings):
    """All configuration for the ad server runtime, validated at startup."""

    model_config = {"env_prefix": "ADSERVER_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Server mode ---
    mcp_mode: McpMode = Field(
        default=McpMode.serve,
        description="Which MCP surface to start: 'serve' (ad requests) or 'admin' (catalog management)",
    )

    # --- Catalog store ---
    catalog_db_path: str = Field(default="data/catalog.db", description="SQLite path for the catalog")

    # --- Cache ---
    refresh_interval_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Seconds between background catalog refreshes",
    )

    # --- Seeding ---
    seed_on_startup: bool = Field(default=False, description="Load the sample catalog when the server starts")
    sample_catalog_path: str | None = Field(
        default=None,
        description="JSON file used for seeding (defaults to data/sample_catalog.json)",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
