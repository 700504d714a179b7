"""DTOs for subject data export."""

from dataclasses import dataclass
from datetime import datetime

from subject_rights.domain.entities.export import ExportDomain


@dataclass(frozen=True)
class SubjectExportResult:
    """Ordered export domains for one privacy request, ready for the delivery layer."""

    request_id: int
    subject_id: int | None
    domains: list[ExportDomain]
    exported_at: datetime

    @property
    def item_count(self) -> int:
        """Total number of items across all domains."""
        return sum(len(domain.items) for domain in self.domains)
