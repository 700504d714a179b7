"""Base repository: lookup by primary key and in-place update of mapped records."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id and update.

    Request data is owned by the host application; repositories here never
    create rows and only update the ones they loaded.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes of a loaded record and refresh it."""
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches or emit events."""
