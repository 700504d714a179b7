"""Domain entities."""

from subject_rights.domain.entities.export import (
    ExportDomain,
    ExportItem,
    SecondarySubject,
)
from subject_rights.domain.entities.subject import Subject

__all__ = ["ExportDomain", "ExportItem", "SecondarySubject", "Subject"]
