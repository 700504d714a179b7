"""Content (article) ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.core.constants import TABLE_CONTENT
from subject_rights.infrastructure.persistence.database import Base


class Content(Base):
    """Table: content. created_by is the authoring account."""

    __tablename__ = TABLE_CONTENT

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    alias: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    introtext: Mapped[str] = mapped_column(Text, nullable=False, default="")
    fulltext: Mapped[str] = mapped_column(Text, nullable=False, default="")
    state: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    catid: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    created_by_alias: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    modified: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    modified_by: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    publish_up: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    ordering: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    hits: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
