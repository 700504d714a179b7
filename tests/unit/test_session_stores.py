"""Session store adapters and factory tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import redis.asyncio as redis
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from subject_rights.core.config import Settings
from subject_rights.domain.exceptions import SessionStoreException
from subject_rights.infrastructure.persistence.models import Session
from subject_rights.infrastructure.sessions.database_store import DatabaseSessionStore
from subject_rights.infrastructure.sessions.factory import SessionStoreFactory
from subject_rights.infrastructure.sessions.null_store import NullSessionStore
from subject_rights.infrastructure.sessions.redis_store import RedisSessionStore

DB_URL = "sqlite+aiosqlite:///:memory:"


class TestFactory:
    def test_database_handler(self) -> None:
        store = SessionStoreFactory.create_session_store(
            MagicMock(), settings=Settings(database_url=DB_URL, session_handler="database")
        )
        assert isinstance(store, DatabaseSessionStore)

    def test_redis_handler_uses_prefix(self) -> None:
        store = SessionStoreFactory.create_session_store(
            MagicMock(),
            redis_client=AsyncMock(),
            settings=Settings(
                database_url=DB_URL, session_handler="redis", session_redis_prefix="sess:"
            ),
        )
        assert isinstance(store, RedisSessionStore)
        assert store.prefix == "sess:"

    def test_redis_handler_requires_client(self) -> None:
        with pytest.raises(ValueError, match="Redis client"):
            SessionStoreFactory.create_session_store(
                MagicMock(), settings=Settings(database_url=DB_URL, session_handler="redis")
            )

    def test_none_handler(self) -> None:
        store = SessionStoreFactory.create_session_store(
            MagicMock(), settings=Settings(database_url=DB_URL, session_handler="none")
        )
        assert isinstance(store, NullSessionStore)


async def test_redis_store_deletes_prefixed_key() -> None:
    client = AsyncMock()
    client.delete = AsyncMock(return_value=1)

    assert await RedisSessionStore(client, prefix="session:").destroy("abc") is True
    client.delete.assert_awaited_once_with("session:abc")


async def test_redis_store_missing_key_returns_false() -> None:
    client = AsyncMock()
    client.delete = AsyncMock(return_value=0)
    assert await RedisSessionStore(client).destroy("abc") is False


async def test_redis_store_wraps_backend_errors() -> None:
    client = AsyncMock()
    client.delete = AsyncMock(side_effect=redis.ConnectionError("down"))

    with pytest.raises(SessionStoreException) as exc_info:
        await RedisSessionStore(client).destroy("abc")
    assert exc_info.value.details["handler"] == "redis"


async def test_null_store_always_succeeds() -> None:
    assert await NullSessionStore().destroy("anything") is True


@pytest.mark.requires_db
async def test_database_store_deletes_only_that_row(db_session, erasure_subject) -> None:
    store = DatabaseSessionStore(db_session)

    assert await store.destroy("sess-7-a") is True
    assert await store.destroy("sess-7-a") is False
    await db_session.commit()

    result = await db_session.execute(select(Session.session_id).order_by(Session.session_id))
    assert list(result.scalars()) == ["sess-7-b", "sess-7-c", "sess-8-a"]


async def test_database_store_failure_is_confined_to_a_savepoint() -> None:
    savepoint = AsyncMock()
    savepoint.__aexit__.return_value = False
    db = MagicMock()
    db.begin_nested = MagicMock(return_value=savepoint)
    db.execute = AsyncMock(side_effect=OperationalError("DELETE", {}, Exception("lock timeout")))

    with pytest.raises(SessionStoreException) as exc_info:
        await DatabaseSessionStore(db).destroy("sess-1")

    db.begin_nested.assert_called_once_with()
    savepoint.__aexit__.assert_awaited_once()
    assert exc_info.value.details["handler"] == "database"
    assert exc_info.value.details["session_id"] == "sess-1"
