"""SqlRowStore integration tests (in-memory SQLite)."""

import pytest

from subject_rights.domain.exceptions import DataSourceException
from subject_rights.infrastructure.persistence.repositories import SqlRowStore


@pytest.mark.requires_db
async def test_query_filters_and_orders(db_session, export_subject) -> None:
    rows = await SqlRowStore(db_session).query(
        "user_notes", {"user_id": export_subject}, order_by=("id",)
    )
    assert [r["id"] for r in rows] == [1, 3]
    assert list(rows[0])[:3] == ["id", "user_id", "catid"]


@pytest.mark.requires_db
async def test_query_match_any(db_session, export_subject) -> None:
    rows = await SqlRowStore(db_session).query(
        "messages",
        {"user_id_from": export_subject, "user_id_to": export_subject},
        order_by=("date_time", "message_id"),
        match_any=True,
    )
    assert [r["subject"] for r in rows] == ["m1", "m2", "m3", "m4", "m5"]


@pytest.mark.requires_db
async def test_query_in_filter_and_delete(db_session, erasure_subject) -> None:
    store = SqlRowStore(db_session)

    deleted = await store.delete("session", {"session_id": ["sess-7-a", "sess-7-b"]})

    assert deleted == 2
    remaining = await store.query("session", {}, order_by=("session_id",))
    assert [r["session_id"] for r in remaining] == ["sess-7-c", "sess-8-a"]


@pytest.mark.requires_db
async def test_unknown_table_or_column_raises(db_session) -> None:
    store = SqlRowStore(db_session)
    with pytest.raises(DataSourceException):
        await store.query("no_such_table", {})
    with pytest.raises(DataSourceException):
        await store.query("users", {"nope": 1})


@pytest.mark.requires_db
async def test_delete_requires_filters(db_session) -> None:
    with pytest.raises(DataSourceException):
        await SqlRowStore(db_session).delete("session", {})
