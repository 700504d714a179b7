"""Persistence models: ORM entities and mixins.

Importing this package registers every table on Base.metadata.
"""

from subject_rights.infrastructure.persistence.models.contact import Contact
from subject_rights.infrastructure.persistence.models.content import Content
from subject_rights.infrastructure.persistence.models.field import Field, FieldValue
from subject_rights.infrastructure.persistence.models.message import Message
from subject_rights.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    CuidMixin,
    TimestampMixin,
)
from subject_rights.infrastructure.persistence.models.permission import (
    Permission,
    RolePermission,
    UserRole,
)
from subject_rights.infrastructure.persistence.models.privacy_request import (
    PrivacyRequest,
)
from subject_rights.infrastructure.persistence.models.role import Role
from subject_rights.infrastructure.persistence.models.session import Session
from subject_rights.infrastructure.persistence.models.user import User
from subject_rights.infrastructure.persistence.models.user_note import UserNote
from subject_rights.infrastructure.persistence.models.user_profile import UserProfile

__all__ = [
    "User",
    "UserNote",
    "UserProfile",
    "Message",
    "Contact",
    "Content",
    "Field",
    "FieldValue",
    "Session",
    "PrivacyRequest",
    "Role",
    "Permission",
    "RolePermission",
    "UserRole",
    "CuidMixin",
    "TimestampMixin",
    "ActiveMixin",
]
