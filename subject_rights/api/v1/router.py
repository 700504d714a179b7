"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from subject_rights.api.v1.dependencies.
"""

from fastapi import APIRouter

from subject_rights.api.v1.endpoints import health, privacy_requests

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    privacy_requests.router, prefix="/privacy/requests", tags=["privacy-requests"]
)
