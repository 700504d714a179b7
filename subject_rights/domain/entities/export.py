"""Export entities: items, domains and secondary subjects.

ExportItem and ExportDomain are immutable once built; an export run
produces a list of domains that is handed to the delivery layer as is.
"""

from dataclasses import dataclass, field
from typing import Any

from subject_rights.domain.enums import SecondarySubjectKind


@dataclass(frozen=True)
class ExportItem:
    """One exported record: optional natural key and display-ready field values."""

    fields: dict[str, str]
    id: int | str | None = None


@dataclass(frozen=True)
class ExportDomain:
    """Named, labelled group of items from one logical data source."""

    name: str
    description: str
    items: tuple[ExportItem, ...] = ()


@dataclass(frozen=True)
class SecondarySubject:
    """Record found during an export run that carries its own custom fields.

    record is a reference to the source row (used as the custom field owner).
    """

    kind: SecondarySubjectKind
    id: int
    record: dict[str, Any] = field(repr=False, compare=False)

    @property
    def schema_key(self) -> str:
        return self.kind.schema_key
