"""Port: ID generation strategies."""

from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class UserIdProvider(Protocol):
    """Generate an identifier for an anonymous user."""

    def new_user_id(self) -> str: ...


class UuidUserIdProvider:
    """Uses uuid4 for user IDs."""

    def new_user_id(self) -> str:
        return str(uuid.uuid4())
