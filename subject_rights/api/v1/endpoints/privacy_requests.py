"""Privacy request API: thin routes delegating to PrivacyRequestService.

Domain errors (unknown request, erasure denied, incomplete export,
persistence failure) are mapped by the central exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from subject_rights.api.v1.dependencies import (
    get_privacy_request_service,
    get_privacy_request_service_for_write,
)
from subject_rights.application.use_cases.privacy import PrivacyRequestService
from subject_rights.schemas.privacy import ExportRequestResponse, RemovalStatusResponse

router = APIRouter()

RequestId = Annotated[int, Path(ge=1, description="Privacy request id")]


@router.get("/{request_id}/removal-status", response_model=RemovalStatusResponse)
async def get_removal_status(
    request_id: RequestId,
    service: Annotated[PrivacyRequestService, Depends(get_privacy_request_service)],
) -> RemovalStatusResponse:
    """Return whether the request's data may be removed and, if not, why."""
    status = await service.can_remove_data(request_id)
    return RemovalStatusResponse.model_validate(status)


@router.post("/{request_id}/export", response_model=ExportRequestResponse)
async def export_request_data(
    request_id: RequestId,
    service: Annotated[PrivacyRequestService, Depends(get_privacy_request_service)],
) -> ExportRequestResponse:
    """Export every data domain held for the request's subject, in fixed order."""
    result = await service.export_request(request_id)
    return ExportRequestResponse.from_result(result)


@router.post("/{request_id}/erasure", status_code=204)
async def erase_request_data(
    request_id: RequestId,
    service: Annotated[
        PrivacyRequestService, Depends(get_privacy_request_service_for_write)
    ],
) -> Response:
    """Pseudonymize the request's subject and end its sessions (409 when not permitted)."""
    await service.remove_data(request_id)
    return Response(status_code=204)
