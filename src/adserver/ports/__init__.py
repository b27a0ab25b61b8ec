"""Port interfaces (Protocols).

Application services depend only on these, never on concrete adapters.
No sqlite3 or transport imports allowed here.
"""

from .catalog_store import CatalogStorePort
from .id_gen import UserIdProvider, UuidUserIdProvider

__all__ = [
    "CatalogStorePort",
    "UserIdProvider",
    "UuidUserIdProvider",
]
