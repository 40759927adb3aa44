"""Tag repository. Returns application DTOs with per-tag contact counts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm.application.dtos.tag import TagResult
from crm.domain.exceptions import DuplicateTagNameException
from crm.infrastructure.persistence.models.tag import ContactTag, Tag
from crm.infrastructure.persistence.repositories.base import BaseRepository


def _tag_to_result(t: Tag, contact_count: int = 0) -> TagResult:
    """Map ORM Tag to application TagResult."""
    return TagResult(
        id=t.id,
        name=t.name,
        color=t.color,
        created_at=t.created_at,
        contact_count=contact_count,
    )


class TagRepository(BaseRepository[Tag]):
    """Tag persistence: CRUD and listing with contact counts."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Tag)

    def _select_with_count(self):
        return (
            select(Tag, func.count(ContactTag.contact_id))
            .outerjoin(ContactTag, ContactTag.tag_id == Tag.id)
            .group_by(Tag.id)
        )

    async def get_by_id(self, tag_id: str) -> TagResult | None:
        result = await self.db.execute(self._select_with_count().where(Tag.id == tag_id))
        row = result.one_or_none()
        return _tag_to_result(row[0], row[1]) if row else None

    async def list_tags(self) -> list[TagResult]:
        """All tags alphabetically, each with the number of contacts carrying it."""
        result = await self.db.execute(self._select_with_count().order_by(Tag.name.asc()))
        return [_tag_to_result(tag, count) for tag, count in result.all()]

    async def create_tag(self, data: Mapping[str, Any]) -> TagResult:
        """Insert a tag; raise DuplicateTagNameException when the name is taken."""
        try:
            tag = await self.add(Tag(**data))
        except IntegrityError as e:
            raise DuplicateTagNameException(data.get("name", "")) from e
        return _tag_to_result(tag)

    async def update_tag(self, tag_id: str, changes: Mapping[str, Any]) -> TagResult | None:
        tag = await self.get_entity(tag_id)
        if tag is None:
            return None
        try:
            await self.apply_changes(tag, changes)
        except IntegrityError as e:
            raise DuplicateTagNameException(changes.get("name", "")) from e
        return await self.get_by_id(tag_id)

    async def delete_tag(self, tag_id: str) -> bool:
        """Delete tag; its contact links cascade in the DB."""
        tag = await self.get_entity(tag_id)
        if tag is None:
            return False
        await self.remove(tag)
        return True
