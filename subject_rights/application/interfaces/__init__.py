"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from subject_rights.infrastructure or subject_rights.api.
"""

from subject_rights.application.interfaces.repositories import (
    ICustomFieldResolver,
    IPrivacyRequestRepository,
    IRowStore,
    ISubjectDirectory,
)
from subject_rights.application.interfaces.services import (
    IPermissionResolver,
    ISessionStore,
)

__all__ = [
    "ICustomFieldResolver",
    "IPermissionResolver",
    "IPrivacyRequestRepository",
    "IRowStore",
    "ISessionStore",
    "ISubjectDirectory",
]
