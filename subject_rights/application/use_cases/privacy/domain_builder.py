"""Export domain builder: turn raw rows and custom fields into ExportDomains.

One DomainBuilder is created per export run. Besides building domains it
keeps the run's discovery list: rows registered with a SecondarySubjectKind
are collected so their own custom fields can be exported afterwards.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time
from typing import Any

from subject_rights.application.dtos.custom_field import CustomFieldValue
from subject_rights.core.constants import VALUE_LIST_SEPARATOR
from subject_rights.domain.entities.export import (
    ExportDomain,
    ExportItem,
    SecondarySubject,
)
from subject_rights.domain.enums import SecondarySubjectKind


def stringify(value: Any) -> str:
    """Render a column value as the display string used in export items."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        members = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return VALUE_LIST_SEPARATOR.join(stringify(v) for v in members)
    if isinstance(value, Mapping):
        return json.dumps(dict(value), sort_keys=True, default=str)
    return str(value)


class DomainBuilder:
    """Builds export domains for one run and records discovered secondary subjects."""

    def __init__(self) -> None:
        self._discovered: list[SecondarySubject] = []

    def build_domain(
        self,
        name: str,
        description: str,
        rows: Iterable[Mapping[str, Any]],
        *,
        id_column: str | None = None,
        redact_columns: Sequence[str] = (),
        discover: SecondarySubjectKind | None = None,
    ) -> ExportDomain:
        """Build a domain with one item per row.

        Redacted columns are dropped; the rest keep the row's column order.
        When id_column is given, row[id_column] becomes the item id (read
        before redaction, so an id column may also be redacted). When
        discover is given, every row is registered as a secondary subject of
        that kind.
        """
        redacted = frozenset(redact_columns)
        items: list[ExportItem] = []
        for row in rows:
            fields = {
                column: stringify(value)
                for column, value in row.items()
                if column not in redacted
            }
            item_id = row.get(id_column) if id_column else None
            items.append(ExportItem(fields=fields, id=item_id))
            if discover is not None:
                self._discovered.append(
                    SecondarySubject(kind=discover, id=row["id"], record=dict(row))
                )
        return ExportDomain(name=name, description=description, items=tuple(items))

    def build_custom_field_domain(
        self,
        name: str,
        description: str,
        owner_key: str,
        owner_id: int,
        fields: Iterable[CustomFieldValue],
    ) -> ExportDomain:
        """Build a domain with one item per custom field of one owner.

        Every item has the shape {owner_key, field_name, field_title, field_value}.
        """
        items = tuple(
            ExportItem(
                fields={
                    owner_key: stringify(owner_id),
                    "field_name": field.name,
                    "field_title": field.title,
                    "field_value": stringify(field.value),
                }
            )
            for field in fields
        )
        return ExportDomain(name=name, description=description, items=items)

    @property
    def discovered(self) -> tuple[SecondarySubject, ...]:
        """Secondary subjects registered so far, in discovery order."""
        return tuple(self._discovered)

    def drain(self, kind: SecondarySubjectKind) -> list[SecondarySubject]:
        """Return and forget the discovered subjects of kind, in discovery order."""
        taken = [s for s in self._discovered if s.kind == kind]
        self._discovered = [s for s in self._discovered if s.kind != kind]
        return taken
