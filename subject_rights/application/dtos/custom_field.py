"""DTOs for custom field resolution (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomFieldValue:
    """One resolved custom field of a record.

    value is a scalar for single-valued fields and a list when the field
    stores several values for the same record.
    """

    name: str
    title: str
    value: str | list[str] | None
