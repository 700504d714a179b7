"""Domain exceptions for the subject rights service.

Defines domain-level exceptions for the export, eligibility and erasure
flows. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from subject_rights.domain.entities.export import ExportDomain


class SubjectRightsException(Exception):
    """Base exception for all subject rights errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (JSON-serializable).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a JSON body (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SubjectRightsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(SubjectRightsException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'privacy_request').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DataSourceException(SubjectRightsException):
    """Raised when reading from or writing to a data source fails."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with the failing source and reason.

        Args:
            source: Table or store that failed (e.g. 'user_notes').
            reason: Human-readable reason (usually the driver error).
        """
        super().__init__(
            f"Data source failed: {source}",
            "DATA_SOURCE_ERROR",
            {"source": source, "reason": reason},
        )


class ExportIncompleteException(SubjectRightsException):
    """Raised when one export domain could not be built.

    The domains built before the failure are kept on completed_domains so
    callers can report them; the export itself is not delivered.
    """

    def __init__(
        self,
        domain: str,
        reason: str,
        completed_domains: Sequence[ExportDomain] = (),
    ) -> None:
        """Initialize with the failing domain and the domains already built.

        Args:
            domain: Name of the domain that failed (e.g. 'user notes').
            reason: Human-readable reason.
            completed_domains: Domains successfully built before the failure.
        """
        self.domain = domain
        self.completed_domains = tuple(completed_domains)
        super().__init__(
            f"Export incomplete: domain '{domain}' failed",
            "EXPORT_INCOMPLETE",
            {
                "domain": domain,
                "reason": reason,
                "completed_domains": [d.name for d in self.completed_domains],
            },
        )


class PersistenceFailureException(SubjectRightsException):
    """Raised when the pseudonymized identity record could not be saved."""

    def __init__(self, subject_id: int, reason: str) -> None:
        """Initialize with subject and reason.

        Args:
            subject_id: Subject whose identity record was not persisted.
            reason: Human-readable reason.
        """
        super().__init__(
            f"Failed to persist pseudonymized identity for subject {subject_id}",
            "PERSISTENCE_FAILURE",
            {"subject_id": subject_id, "reason": reason},
        )


class ErasureNotPermittedException(SubjectRightsException):
    """Raised when an erasure is requested for a subject the eligibility check denies."""

    def __init__(self, subject_id: int, reason: str | None) -> None:
        super().__init__(
            reason or "Erasure is not permitted for this subject",
            "ERASURE_NOT_PERMITTED",
            {"subject_id": subject_id},
        )


class SqlNotConfiguredException(SubjectRightsException):
    """Raised when an operation requires the SQL database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class SessionStoreException(SubjectRightsException):
    """Raised when the live session store fails to destroy a session."""

    def __init__(self, handler: str, session_id: str, reason: str) -> None:
        super().__init__(
            f"Session store '{handler}' failed to destroy a session",
            "SESSION_STORE_ERROR",
            {"handler": handler, "session_id": session_id, "reason": reason},
        )


class RequestTypeMismatchException(SubjectRightsException):
    """Raised when an operation is invoked on a request of another type."""

    def __init__(self, request_id: int, expected: str, actual: str) -> None:
        super().__init__(
            f"Privacy request {request_id} is a '{actual}' request, not '{expected}'",
            "REQUEST_TYPE_MISMATCH",
            {"request_id": request_id, "expected": expected, "actual": actual},
        )
