"""Domain value objects."""

from subject_rights.domain.value_objects.removal_status import RemovalStatus

__all__ = ["RemovalStatus"]
