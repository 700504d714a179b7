"""Private message ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.core.constants import TABLE_MESSAGES
from subject_rights.infrastructure.persistence.database import Base


class Message(Base):
    """Table: messages. A subject owns messages it sent or received."""

    __tablename__ = TABLE_MESSAGES

    message_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id_from: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    user_id_to: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    folder_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    date_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    state: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    subject: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
