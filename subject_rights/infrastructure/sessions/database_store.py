"""Database session store: live sessions are the rows of the session table."""

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.domain.exceptions import SessionStoreException
from subject_rights.infrastructure.persistence.models.session import Session


class DatabaseSessionStore:
    """Destroys a session by deleting its row.

    Each delete runs in a savepoint so a failure rolls back only that
    statement and the surrounding erasure transaction stays usable.
    """

    handler = "database"

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def destroy(self, session_id: str) -> bool:
        try:
            async with self.db.begin_nested():
                result = await self.db.execute(
                    delete(Session).where(Session.session_id == session_id)
                )
        except SQLAlchemyError as e:
            raise SessionStoreException(self.handler, session_id, str(e)) from e
        return bool(result.rowcount)
