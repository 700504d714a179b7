"""Application use cases: one entry point per workflow."""

from subject_rights.application.use_cases.privacy import PrivacyRequestService

__all__ = ["PrivacyRequestService"]
