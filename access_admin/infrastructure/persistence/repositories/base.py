"""Base repository: generic lookups and persistence for one model."""

from typing import Any

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from access_admin.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id and save.

    save() works for new and already-loaded entities: transient objects are
    added to the session, then changes are flushed and the row refreshed so
    server defaults (timestamps) are populated.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def save(self, obj: ModelType) -> ModelType:
        """Insert obj if new, flush pending changes and refresh from the database."""
        if sa_inspect(obj).transient:
            self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
