"""Privacy request use cases: eligibility, export and erasure."""

from subject_rights.application.use_cases.privacy.domain_builder import (
    DomainBuilder,
    stringify,
)
from subject_rights.application.use_cases.privacy.privacy_request_operations import (
    PrivacyRequestService,
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

__all__ = [
    "DomainBuilder",
    "PrivacyRequestService",
    "RemovalEligibilityChecker",
    "SubjectErasureExecutor",
    "SubjectExportOrchestrator",
    "stringify",
]
