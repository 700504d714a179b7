"""Privacy request service: the entry points invoked for a stored privacy request."""

from __future__ import annotations

import logging

from subject_rights.application.dtos.privacy_request import PrivacyRequestResult
from subject_rights.application.dtos.subject_export import SubjectExportResult
from subject_rights.application.interfaces.repositories import (
    IPrivacyRequestRepository,
)
from subject_rights.application.use_cases.privacy.removal_eligibility import (
    RemovalEligibilityChecker,
)
from subject_rights.application.use_cases.privacy.subject_erasure import (
    SubjectErasureExecutor,
)
from subject_rights.application.use_cases.privacy.subject_export import (
    SubjectExportOrchestrator,
)
from subject_rights.domain.enums import PrivacyRequestType
from subject_rights.domain.exceptions import (
    ErasureNotPermittedException,
    RequestTypeMismatchException,
    ResourceNotFoundException,
)
from subject_rights.domain.value_objects.removal_status import RemovalStatus
from subject_rights.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class PrivacyRequestService:
    """Removal status check, data export and data removal for one privacy request.

    Collaborators are optional so read-only callers need not build the
    erasure executor (and its session store).
    """

    def __init__(
        self,
        request_repo: IPrivacyRequestRepository,
        eligibility_checker: RemovalEligibilityChecker,
        export_orchestrator: SubjectExportOrchestrator | None = None,
        erasure_executor: SubjectErasureExecutor | None = None,
    ) -> None:
        self._request_repo = request_repo
        self._eligibility_checker = eligibility_checker
        self._export_orchestrator = export_orchestrator
        self._erasure_executor = erasure_executor

    async def get_request(self, request_id: int) -> PrivacyRequestResult:
        """Return the request or raise ResourceNotFoundException."""
        request = await self._request_repo.get_by_id(request_id)
        if request is None:
            raise ResourceNotFoundException("privacy_request", request_id)
        return request

    async def _get_request_of_type(
        self, request_id: int, expected: PrivacyRequestType
    ) -> PrivacyRequestResult:
        request = await self.get_request(request_id)
        if request.request_type != expected.value:
            raise RequestTypeMismatchException(request.id, expected.value, request.request_type)
        return request

    async def can_remove_data(self, request_id: int) -> RemovalStatus:
        request = await self.get_request(request_id)
        return await self._eligibility_checker.can_erase(request)

    async def export_request(self, request_id: int) -> SubjectExportResult:
        """Export all data held for the request's subject (empty when there is none)."""
        if self._export_orchestrator is None:
            raise RuntimeError("PrivacyRequestService was built without an exporter")
        request = await self._get_request_of_type(request_id, PrivacyRequestType.EXPORT)
        domains = await self._export_orchestrator.export_subject(request.user_id)
        return SubjectExportResult(
            request_id=request.id,
            subject_id=request.user_id or None,
            domains=domains,
            exported_at=utc_now(),
        )

    async def remove_data(self, request_id: int) -> RemovalStatus:
        """Erase the request's subject after the eligibility check.

        Raises:
            ResourceNotFoundException: Unknown request.
            RequestTypeMismatchException: The request is not a removal request.
            ErasureNotPermittedException: The subject may not be erased.
            PersistenceFailureException: The pseudonymized identity was not saved.
        """
        if self._erasure_executor is None:
            raise RuntimeError("PrivacyRequestService was built without an eraser")
        request = await self._get_request_of_type(request_id, PrivacyRequestType.REMOVE)
        status = await self._eligibility_checker.can_erase(request)
        if not status.can_remove:
            raise ErasureNotPermittedException(request.user_id or 0, status.reason)
        await self._erasure_executor.erase_subject(request.user_id)
        logger.info("Processed removal for privacy request %s", request.id)
        return status
