"""Session ORM model: one row per live (or recently live) host session."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.core.constants import TABLE_SESSION
from subject_rights.infrastructure.persistence.database import Base
from subject_rights.shared.utils.generators import generate_cuid


class Session(Base):
    """Table: session. userid is the owning account (0 for guests)."""

    __tablename__ = TABLE_SESSION

    session_id: Mapped[str] = mapped_column(String(191), primary_key=True, default=generate_cuid)
    client_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    guest: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    data: Mapped[str | None] = mapped_column(Text, nullable=True)
    userid: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False, default="")
