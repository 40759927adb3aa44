"""Base repository: generic get/create/update/delete over one ORM model."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_entity, add, apply_changes and remove.

    Subclasses expose DTO-returning methods; ORM instances stay inside the
    repository layer.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity(self, entity_id: str) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def exists(self, entity_id: str) -> bool:
        model: Any = self.model
        result = await self.db.execute(select(model.id).where(model.id == entity_id))
        return result.scalar_one_or_none() is not None

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record; server defaults are loaded back onto obj."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def apply_changes(
        self, obj: ModelType, changes: Mapping[str, Any]
    ) -> ModelType:
        """Set each provided attribute on obj, flush, and reload server-side values."""
        for key, value in changes.items():
            if not hasattr(obj, key):
                raise ValueError(f"{self.model.__name__} has no attribute '{key}'")
            setattr(obj, key, value)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def remove(self, obj: ModelType) -> None:
        await self.db.delete(obj)
        await self.db.flush()
