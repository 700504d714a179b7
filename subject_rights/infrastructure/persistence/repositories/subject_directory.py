"""Subject directory over the users table (implements ISubjectDirectory)."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.application.interfaces.services import IPermissionResolver
from subject_rights.domain.entities.subject import Subject
from subject_rights.domain.exceptions import (
    DataSourceException,
    PersistenceFailureException,
)
from subject_rights.infrastructure.persistence.models.user import User
from subject_rights.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _user_to_subject(user: User) -> Subject:
    record: dict[str, Any] = {
        column.key: getattr(user, column.key) for column in User.__table__.columns
    }
    return Subject(
        id=user.id,
        name=user.name,
        username=user.username,
        email=user.email,
        block=bool(user.block),
        record=record,
    )


class SqlSubjectDirectory(BaseRepository[User]):
    """Loads subjects from users, saves pseudonymized identities, checks capabilities."""

    def __init__(self, db: AsyncSession, permission_resolver: IPermissionResolver) -> None:
        super().__init__(db, User)
        self._permission_resolver = permission_resolver

    async def load_subject(self, subject_id: int) -> Subject | None:
        try:
            user = await self.get_by_id(subject_id)
        except SQLAlchemyError as e:
            raise DataSourceException(User.__tablename__, str(e)) from e
        return _user_to_subject(user) if user else None

    async def save(self, subject: Subject) -> bool:
        """Write the subject's identity fields back; False when the row is gone."""
        try:
            user = await self.get_by_id(subject.id)
            if user is None:
                logger.warning("Cannot save subject %s: identity record not found", subject.id)
                return False
            user.name = subject.name
            user.username = subject.username
            user.email = subject.email
            user.block = subject.block
            await self.update(user)
        except SQLAlchemyError as e:
            raise PersistenceFailureException(subject.id, str(e)) from e
        return True

    async def has_capability(self, subject: Subject, capability: str) -> bool:
        permissions = await self._permission_resolver.get_user_permissions(subject.id)
        return capability in permissions
