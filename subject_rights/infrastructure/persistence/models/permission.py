"""Permission, RolePermission, and UserRole ORM models (RBAC)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from subject_rights.core.constants import TABLE_USERS
from subject_rights.infrastructure.persistence.database import Base
from subject_rights.infrastructure.persistence.models.mixins import CuidMixin


class Permission(CuidMixin, Base):
    """Permission. Table: permission. code is a capability such as core.admin."""

    __tablename__ = "permission"

    code: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class RolePermission(CuidMixin, Base):
    """Many-to-many role-permission. Table: role_permission."""

    __tablename__ = "role_permission"

    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    permission_id: Mapped[str] = mapped_column(
        String, ForeignKey("permission.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("role_id", "permission_id", name="uq_role_permission"),
    )


class UserRole(CuidMixin, Base):
    """Many-to-many user-role. Table: user_role. expires_at null means no expiry."""

    __tablename__ = "user_role"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey(f"{TABLE_USERS}.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (UniqueConstraint("user_id", "role_id", name="uq_user_role"),)
