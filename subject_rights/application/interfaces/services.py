"""Service interfaces (ports) for the application layer.

Protocols define contracts for infrastructure services (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Live session store interface
class ISessionStore(Protocol):
    """Protocol for the host's live session store (database, redis, none).

    destroy() raises domain SessionStoreException when the backend fails.
    """

    async def destroy(self, session_id: str) -> bool:
        """Destroy the live session; return True if it existed (or the store keeps none)."""


# Permission resolver interface
class IPermissionResolver(Protocol):
    """Protocol for resolving a user's permission codes (role-based)."""

    async def get_user_permissions(self, user_id: int) -> set[str]:
        """Return the set of permission codes granted to user through active roles."""
