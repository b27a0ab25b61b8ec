"""Data models."""

from .catalog import AdFormat, AdPlacement, CatalogSnapshot, Creative
from .requests import AdRequest
from .responses import AdResponse, ServeOutcome, ServeStatus

__all__ = [
    "AdFormat",
    "AdPlacement",
    "AdRequest",
    "AdResponse",
    "CatalogSnapshot",
    "Creative",
    "ServeOutcome",
    "ServeStatus",
]
