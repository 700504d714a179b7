"""Custom field resolver over the fields / fields_values tables (implements ICustomFieldResolver)."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.application.dtos.custom_field import CustomFieldValue
from subject_rights.core.constants import FIELD_STATE_PUBLISHED
from subject_rights.domain.exceptions import DataSourceException
from subject_rights.infrastructure.persistence.models.field import Field, FieldValue
from subject_rights.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class SqlCustomFieldResolver:
    """Resolves the published custom fields of any record for a schema key.

    A field with one stored value resolves to that value; several stored
    values resolve to a list in insertion order; no stored value falls back
    to the field's default_value.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @traced("custom_fields.get_fields")
    async def get_fields(
        self, schema_key: str, owner: Mapping[str, Any]
    ) -> list[CustomFieldValue]:
        owner_id = owner.get("id")
        if not owner_id:
            return []
        try:
            fields_result = await self.db.execute(
                select(Field)
                .where(Field.context == schema_key, Field.state == FIELD_STATE_PUBLISHED)
                .order_by(Field.ordering.asc(), Field.id.asc())
            )
            fields = list(fields_result.scalars().all())
            if not fields:
                return []
            values_result = await self.db.execute(
                select(FieldValue.field_id, FieldValue.value)
                .where(
                    FieldValue.field_id.in_([f.id for f in fields]),
                    FieldValue.item_id == str(owner_id),
                )
                .order_by(FieldValue.id.asc())
            )
            stored: dict[int, list[str | None]] = defaultdict(list)
            for field_id, value in values_result.all():
                stored[field_id].append(value)
        except SQLAlchemyError as e:
            logger.error("Custom field lookup for %s failed: %s", schema_key, e)
            raise DataSourceException("fields", str(e)) from e

        resolved: list[CustomFieldValue] = []
        for field in fields:
            values = stored.get(field.id)
            if not values:
                value: str | list[str] | None = field.default_value
            elif len(values) == 1:
                value = values[0]
            else:
                value = [v or "" for v in values]
            resolved.append(CustomFieldValue(name=field.name, title=field.title, value=value))
        return resolved
