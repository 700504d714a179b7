"""Removal eligibility: decide whether a request's data may be erased."""

from __future__ import annotations

import logging

from subject_rights.application.dtos.privacy_request import PrivacyRequestResult
from subject_rights.application.interfaces.repositories import ISubjectDirectory
from subject_rights.domain.value_objects.removal_status import RemovalStatus
from subject_rights.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class RemovalEligibilityChecker:
    """Denies erasure of accounts holding the super-privileged capability.

    A request without a subject, or whose subject cannot be loaded, is
    permitted: there is no privileged account to protect.
    """

    def __init__(
        self,
        subject_directory: ISubjectDirectory,
        *,
        capability: str,
        denial_reason: str,
    ) -> None:
        self._subject_directory = subject_directory
        self._capability = capability
        self._denial_reason = denial_reason

    @traced("privacy.can_erase")
    async def can_erase(self, request: PrivacyRequestResult) -> RemovalStatus:
        if not request.user_id:
            return RemovalStatus.permitted()
        subject = await self._subject_directory.load_subject(request.user_id)
        if subject is None:
            logger.info(
                "Subject %s of request %s not found; removal permitted",
                request.user_id,
                request.id,
            )
            return RemovalStatus.permitted()
        if await self._subject_directory.has_capability(subject, self._capability):
            logger.info("Removal denied for request %s: privileged subject", request.id)
            return RemovalStatus.denied(self._denial_reason)
        return RemovalStatus.permitted()
