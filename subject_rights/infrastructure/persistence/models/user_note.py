"""User note ORM model (notes written by operators about an account)."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.core.constants import TABLE_USER_NOTES
from subject_rights.infrastructure.persistence.database import Base


class UserNote(Base):
    """Table: user_notes. user_id is the account the note is about."""

    __tablename__ = TABLE_USER_NOTES

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    catid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    subject: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    state: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_user_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    modified_user_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    modified_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    review_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
