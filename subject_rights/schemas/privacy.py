"""Privacy request API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from subject_rights.application.dtos.subject_export import SubjectExportResult


class RemovalStatusResponse(BaseModel):
    """Response for GET /privacy/requests/{id}/removal-status."""

    model_config = ConfigDict(from_attributes=True)

    can_remove: bool
    reason: str | None = Field(default=None, description="Why removal is denied")


class ExportItemResponse(BaseModel):
    """One exported record (display strings keyed by field name)."""

    model_config = ConfigDict(from_attributes=True)

    id: int | str | None = None
    fields: dict[str, str]


class ExportDomainResponse(BaseModel):
    """One named group of exported records."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str
    items: list[ExportItemResponse]


class ExportRequestResponse(BaseModel):
    """Response for POST /privacy/requests/{id}/export: ordered domains for the delivery layer."""

    model_config = ConfigDict(from_attributes=True)

    request_id: int
    subject_id: int | None
    exported_at: datetime
    item_count: int
    domains: list[ExportDomainResponse]

    @classmethod
    def from_result(cls, result: SubjectExportResult) -> "ExportRequestResponse":
        return cls.model_validate(result)
