"""Redis session store: live session payloads are keyed {prefix}{session_id}."""

from __future__ import annotations

import logging

import redis.asyncio as redis

from subject_rights.domain.exceptions import SessionStoreException

logger = logging.getLogger(__name__)


class RedisSessionStore:
    """Destroys a session by deleting its Redis key."""

    handler = "redis"

    def __init__(self, redis_client: redis.Redis, prefix: str = "session:") -> None:
        self.redis = redis_client
        self.prefix = prefix

    def _key(self, session_id: str) -> str:
        return f"{self.prefix}{session_id}"

    async def destroy(self, session_id: str) -> bool:
        try:
            deleted = await self.redis.delete(self._key(session_id))
        except redis.RedisError as e:
            raise SessionStoreException(self.handler, session_id, str(e)) from e
        if not deleted:
            logger.debug("Session key %s was already gone", self._key(session_id))
        return bool(deleted)
