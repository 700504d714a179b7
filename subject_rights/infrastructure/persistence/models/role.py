"""Role ORM model (e.g. super users, administrators)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.infrastructure.persistence.database import Base
from subject_rights.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    CuidMixin,
    TimestampMixin,
)


class Role(CuidMixin, TimestampMixin, ActiveMixin, Base):
    """Role. Table: role. Unique code."""

    __tablename__ = "role"

    code: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
