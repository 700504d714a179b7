"""Live session store adapters (database, redis, none)."""

from subject_rights.infrastructure.sessions.factory import SessionStoreFactory

__all__ = ["SessionStoreFactory"]
