"""Repositories: data source adapters for the export and erasure flows."""

from subject_rights.infrastructure.persistence.repositories.base import BaseRepository
from subject_rights.infrastructure.persistence.repositories.custom_field_resolver import (
    SqlCustomFieldResolver,
)
from subject_rights.infrastructure.persistence.repositories.privacy_request_repo import (
    PrivacyRequestRepository,
)
from subject_rights.infrastructure.persistence.repositories.row_store import SqlRowStore
from subject_rights.infrastructure.persistence.repositories.subject_directory import (
    SqlSubjectDirectory,
)

__all__ = [
    "BaseRepository",
    "PrivacyRequestRepository",
    "SqlCustomFieldResolver",
    "SqlRowStore",
    "SqlSubjectDirectory",
]
