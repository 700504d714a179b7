"""Application DTOs (no dependency on ORM)."""

from subject_rights.application.dtos.custom_field import CustomFieldValue
from subject_rights.application.dtos.privacy_request import PrivacyRequestResult
from subject_rights.application.dtos.subject_export import SubjectExportResult

__all__ = ["CustomFieldValue", "PrivacyRequestResult", "SubjectExportResult"]
