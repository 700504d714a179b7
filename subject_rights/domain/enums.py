"""Domain enumerations for the subject rights service.

Enums represent fixed sets of domain values (e.g. request type).
"""

from enum import Enum

from subject_rights.core.constants import SCHEMA_KEY_CONTACT, SCHEMA_KEY_CONTENT


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class SecondarySubjectKind(_ValuesMixin, str, Enum):
    """Kind of record discovered while exporting a subject.

    Each kind carries its own custom fields, resolved with schema_key.
    """

    CONTACT = "contact"
    CONTENT = "content"

    @property
    def schema_key(self) -> str:
        """Custom field context used to resolve this kind's fields."""
        return _SCHEMA_KEYS[self]


_SCHEMA_KEYS = {
    SecondarySubjectKind.CONTACT: SCHEMA_KEY_CONTACT,
    SecondarySubjectKind.CONTENT: SCHEMA_KEY_CONTENT,
}


class PrivacyRequestType(_ValuesMixin, str, Enum):
    """Type of a privacy request held by the request store."""

    EXPORT = "export"
    REMOVE = "remove"


class PrivacyRequestStatus(_ValuesMixin, str, Enum):
    """Lifecycle status of a privacy request (managed by the host)."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    INVALID = "invalid"
