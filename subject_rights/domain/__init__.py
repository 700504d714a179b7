"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from subject_rights.domain.entities import (
    ExportDomain,
    ExportItem,
    SecondarySubject,
    Subject,
)
from subject_rights.domain.enums import (
    PrivacyRequestStatus,
    PrivacyRequestType,
    SecondarySubjectKind,
)
from subject_rights.domain.exceptions import (
    DataSourceException,
    ErasureNotPermittedException,
    ExportIncompleteException,
    PersistenceFailureException,
    RequestTypeMismatchException,
    ResourceNotFoundException,
    SessionStoreException,
    SubjectRightsException,
    ValidationException,
)
from subject_rights.domain.value_objects import RemovalStatus

__all__ = [
    # Entities
    "ExportDomain",
    "ExportItem",
    "SecondarySubject",
    "Subject",
    # Enums
    "PrivacyRequestStatus",
    "PrivacyRequestType",
    "SecondarySubjectKind",
    # Exceptions
    "DataSourceException",
    "ErasureNotPermittedException",
    "ExportIncompleteException",
    "PersistenceFailureException",
    "RequestTypeMismatchException",
    "ResourceNotFoundException",
    "SessionStoreException",
    "SubjectRightsException",
    "ValidationException",
    # Value objects
    "RemovalStatus",
]
