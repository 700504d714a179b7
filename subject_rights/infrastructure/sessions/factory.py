"""Session store factory: creates the database, redis or none store from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from subject_rights.application.interfaces.services import ISessionStore

if TYPE_CHECKING:
    import redis.asyncio as redis
    from sqlalchemy.ext.asyncio import AsyncSession

    from subject_rights.core.config import Settings


class SessionStoreFactory:
    """Factory for session store instances based on configuration."""

    @staticmethod
    def create_session_store(
        db: "AsyncSession",
        redis_client: "redis.Redis | None" = None,
        settings: "Settings | None" = None,
    ) -> ISessionStore:
        """Create the session store named by settings.session_handler.

        Args:
            db: Session used by the database handler.
            redis_client: Client used by the redis handler.
            settings: Application settings; if None, uses get_settings().

        Returns:
            DatabaseSessionStore, RedisSessionStore or NullSessionStore.

        Raises:
            ValueError: Unknown handler or missing redis client.
        """
        from subject_rights.core.config import get_settings

        s = settings or get_settings()
        handler = s.session_handler.lower()

        if handler == "database":
            from subject_rights.infrastructure.sessions.database_store import (
                DatabaseSessionStore,
            )

            return DatabaseSessionStore(db)
        if handler == "redis":
            if redis_client is None:
                raise ValueError("A Redis client is required for the redis session handler")
            from subject_rights.infrastructure.sessions.redis_store import (
                RedisSessionStore,
            )

            return RedisSessionStore(redis_client, prefix=s.session_redis_prefix)
        if handler == "none":
            from subject_rights.infrastructure.sessions.null_store import NullSessionStore

            return NullSessionStore()
        raise ValueError(
            f"Unknown session handler: {handler}. Supported: 'database', 'redis', 'none'"
        )
