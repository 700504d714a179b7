"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from subject_rights.application.dtos.custom_field import CustomFieldValue
    from subject_rights.application.dtos.privacy_request import PrivacyRequestResult
    from subject_rights.domain.entities.subject import Subject


# Subject directory interface
class ISubjectDirectory(Protocol):
    """Protocol for loading, saving and capability-checking subjects (DIP)."""

    async def load_subject(self, subject_id: int) -> Subject | None:
        """Return subject by ID, or None when no such account exists."""

    async def save(self, subject: Subject) -> bool:
        """Persist the subject's identity fields; False if the record no longer exists."""

    async def has_capability(self, subject: Subject, capability: str) -> bool:
        """Return True if the subject holds the capability (e.g. 'core.admin')."""


# Generic row store interface
class IRowStore(Protocol):
    """Protocol for reading and deleting rows of a named table (DIP).

    filters maps column -> value. A list/tuple/set value matches any of its
    members (IN); None matches NULL. Conditions are AND-ed unless match_any.
    Rows are returned as dicts in table column order.
    """

    async def query(
        self,
        table: str,
        filters: Mapping[str, Any],
        *,
        order_by: Sequence[str] = (),
        match_any: bool = False,
    ) -> list[dict[str, Any]]:
        """Return matching rows ordered by order_by (ascending)."""

    async def delete(self, table: str, filters: Mapping[str, Any]) -> int:
        """Delete matching rows in one statement; return number of rows deleted."""


# Custom field resolver interface
class ICustomFieldResolver(Protocol):
    """Protocol for resolving the custom fields attached to any record (DIP)."""

    async def get_fields(
        self, schema_key: str, owner: Mapping[str, Any]
    ) -> list[CustomFieldValue]:
        """Return the published custom fields of owner (a row with an 'id') for schema_key."""


# Privacy request repository interface
class IPrivacyRequestRepository(Protocol):
    """Protocol for the request store (read-only here)."""

    async def get_by_id(self, request_id: int) -> PrivacyRequestResult | None:
        """Return privacy request by ID."""
