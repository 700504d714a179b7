"""Generic row store over the mapped tables (implements IRowStore).

Reads and deletes rows of any table registered on Base.metadata by column
filters. Rows come back as plain dicts in table column order so the export
builder sees every column of the host's table.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import Table, and_, delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from subject_rights.domain.exceptions import DataSourceException
from subject_rights.infrastructure.persistence.database import Base
from subject_rights.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class SqlRowStore:
    """Row store backed by the request's AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _table(self, table: str) -> Table:
        try:
            return Base.metadata.tables[table]
        except KeyError:
            raise DataSourceException(table, "unknown table") from None

    def _conditions(
        self, table: Table, filters: Mapping[str, Any]
    ) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        for column_name, value in filters.items():
            if column_name not in table.c:
                raise DataSourceException(table.name, f"unknown column: {column_name}")
            column = table.c[column_name]
            if value is None:
                conditions.append(column.is_(None))
            elif isinstance(value, (list, tuple, set, frozenset)):
                conditions.append(column.in_(list(value)))
            else:
                conditions.append(column == value)
        return conditions

    @traced("row_store.query")
    async def query(
        self,
        table: str,
        filters: Mapping[str, Any],
        *,
        order_by: Sequence[str] = (),
        match_any: bool = False,
    ) -> list[dict[str, Any]]:
        """Return rows of table matching filters, ordered ascending by order_by."""
        source = self._table(table)
        stmt = select(source)
        conditions = self._conditions(source, filters)
        if conditions:
            stmt = stmt.where(or_(*conditions) if match_any else and_(*conditions))
        for column_name in order_by:
            if column_name not in source.c:
                raise DataSourceException(table, f"unknown column: {column_name}")
            stmt = stmt.order_by(source.c[column_name].asc())
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Query on %s failed: %s", table, e)
            raise DataSourceException(table, str(e)) from e
        return [dict(row) for row in result.mappings().all()]

    @traced("row_store.delete")
    async def delete(self, table: str, filters: Mapping[str, Any]) -> int:
        """Delete rows of table matching all filters in one statement."""
        source = self._table(table)
        conditions = self._conditions(source, filters)
        if not conditions:
            raise DataSourceException(table, "refusing to delete without filters")
        try:
            result = await self.db.execute(delete(source).where(and_(*conditions)))
        except SQLAlchemyError as e:
            logger.error("Delete on %s failed: %s", table, e)
            raise DataSourceException(table, str(e)) from e
        return result.rowcount or 0
