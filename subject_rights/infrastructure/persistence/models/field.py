"""Custom field ORM models: field definitions and per-record values."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.infrastructure.persistence.database import Base


class Field(Base):
    """Custom field definition. Table: fields. context is the schema key (e.g. com_users.user)."""

    __tablename__ = "fields"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    context: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    label: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    type: Mapped[str] = mapped_column(String(255), nullable=False, default="text")
    default_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    ordering: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class FieldValue(Base):
    """Stored value of a field for one record. Table: fields_values.

    item_id is the owning record's id as text; a field may hold several rows
    for the same record (multi-valued fields).
    """

    __tablename__ = "fields_values"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    field_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("fields.id", ondelete="CASCADE"), nullable=False
    )
    item_id: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("ix_fields_values_lookup", "field_id", "item_id"),)
