"""User profile ORM model (key/value profile attributes)."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from subject_rights.core.constants import TABLE_USER_PROFILES
from subject_rights.infrastructure.persistence.database import Base


class UserProfile(Base):
    """Table: user_profiles. Primary key (user_id, profile_key)."""

    __tablename__ = TABLE_USER_PROFILES

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    profile_key: Mapped[str] = mapped_column(String(100), primary_key=True)
    profile_value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    ordering: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
