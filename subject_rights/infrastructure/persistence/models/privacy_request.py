"""Privacy request ORM model (request store)."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from subject_rights.domain.enums import PrivacyRequestStatus
from subject_rights.infrastructure.persistence.database import Base


class PrivacyRequest(Base):
    """Table: privacy_requests. user_id is null when the requester has no account."""

    __tablename__ = "privacy_requests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    requested_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PrivacyRequestStatus.PENDING.value
    )
    request_type: Mapped[str] = mapped_column(String(20), nullable=False)
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
