"""Pydantic request/response schemas for the API."""

from subject_rights.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from subject_rights.schemas.privacy import (
    ExportDomainResponse,
    ExportItemResponse,
    ExportRequestResponse,
    RemovalStatusResponse,
)

__all__ = [
    "ExportDomainResponse",
    "ExportItemResponse",
    "ExportRequestResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "RemovalStatusResponse",
]
