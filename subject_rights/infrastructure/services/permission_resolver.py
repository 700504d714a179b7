"""Resolves user permissions from DB (implements IPermissionResolver)."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.infrastructure.persistence.models.permission import (
    Permission,
    RolePermission,
    UserRole,
)
from subject_rights.infrastructure.persistence.models.role import Role
from subject_rights.shared.utils.datetime import utc_now


class PermissionResolver:
    """Resolves user permissions by querying roles and role_permissions."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_user_permissions(self, user_id: int) -> set[str]:
        """Return set of permission codes for user (active roles, not expired)."""
        query = (
            select(Permission.code)
            .select_from(UserRole)
            .join(RolePermission, RolePermission.role_id == UserRole.role_id)
            .join(Permission, Permission.id == RolePermission.permission_id)
            .join(Role, Role.id == UserRole.role_id)
            .where(
                UserRole.user_id == user_id,
                Role.is_active.is_(True),
                or_(
                    UserRole.expires_at.is_(None),
                    UserRole.expires_at > utc_now(),
                ),
            )
        )
        result = await self.db.execute(query)
        return {row[0] for row in result.fetchall()}
