"""Infrastructure services (permission resolution)."""

from subject_rights.infrastructure.services.permission_resolver import (
    PermissionResolver,
)

__all__ = ["PermissionResolver"]
