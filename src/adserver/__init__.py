"""adserver: highest-price creative serving from a cached SQLite catalog."""

from .errors import CatalogError, DuplicateKeyError, NotFoundError, StoreUnavailableError
from .models import (
    AdFormat,
    AdPlacement,
    AdRequest,
    AdResponse,
    CatalogSnapshot,
    Creative,
    ServeOutcome,
    ServeStatus,
)

__version__ = "0.1.0"
__all__ = [
    "AdFormat",
    "AdPlacement",
    "AdRequest",
    "AdResponse",
    "CatalogError",
    "CatalogSnapshot",
    "Creative",
    "DuplicateKeyError",
    "NotFoundError",
    "ServeOutcome",
    "ServeStatus",
    "StoreUnavailableError",
]
