"""Privacy request repository (request store, read-only)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.application.dtos.privacy_request import PrivacyRequestResult
from subject_rights.infrastructure.persistence.models.privacy_request import (
    PrivacyRequest,
)
from subject_rights.infrastructure.persistence.repositories.base import BaseRepository
from subject_rights.shared.utils.datetime import ensure_utc


def _privacy_request_to_result(row: PrivacyRequest) -> PrivacyRequestResult:
    return PrivacyRequestResult(
        id=row.id,
        email=row.email,
        request_type=row.request_type,
        status=row.status,
        requested_at=ensure_utc(row.requested_at),
        user_id=row.user_id,
    )


class PrivacyRequestRepository(BaseRepository[PrivacyRequest]):
    """Privacy request reads; returns application DTOs."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PrivacyRequest)

    async def get_by_id(self, request_id: int) -> PrivacyRequestResult | None:  # type: ignore[override]
        row = await super().get_by_id(request_id)
        return _privacy_request_to_result(row) if row else None
