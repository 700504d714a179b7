"""Application layer: interfaces, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (row store, subject directory,
custom field resolver, session stores, request store).
"""

from subject_rights.application.interfaces import (
    ICustomFieldResolver,
    IPermissionResolver,
    IPrivacyRequestRepository,
    IRowStore,
    ISessionStore,
    ISubjectDirectory,
)
from subject_rights.application.use_cases.privacy import (
    PrivacyRequestService,
    RemovalEligibilityChecker,
    SubjectErasureExecutor,
    SubjectExportOrchestrator,
)

__all__ = [
    "ICustomFieldResolver",
    "IPermissionResolver",
    "IPrivacyRequestRepository",
    "IRowStore",
    "ISessionStore",
    "ISubjectDirectory",
    "PrivacyRequestService",
    "RemovalEligibilityChecker",
    "SubjectErasureExecutor",
    "SubjectExportOrchestrator",
]
