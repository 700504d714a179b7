"""User ORM model: the host's identity table (one row per account)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.core.constants import TABLE_USERS
from subject_rights.infrastructure.persistence.database import Base


class User(Base):
    """Account. Table: users. Column order is the export column order."""

    __tablename__ = TABLE_USERS

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    password: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    block: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    send_email: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    register_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_visit_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    activation: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    params: Mapped[str] = mapped_column(Text, nullable=False, default="")
    last_reset_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    reset_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    otp_key: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    otep: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    require_reset: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
