"""Tag use cases: CRUD with contact counts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from crm.application.dtos.tag import TagResult
from crm.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import ITagRepository


class TagService:
    def __init__(self, tag_repo: ITagRepository) -> None:
        self.tag_repo = tag_repo

    async def list_tags(self) -> list[TagResult]:
        return await self.tag_repo.list_tags()

    async def get_tag(self, tag_id: str) -> TagResult:
        tag = await self.tag_repo.get_by_id(tag_id)
        if tag is None:
            raise ResourceNotFoundException("tag", tag_id)
        return tag

    async def create_tag(self, data: Mapping[str, Any]) -> TagResult:
        """Create tag; DuplicateTagNameException propagates from the repository."""
        return await self.tag_repo.create_tag(data)

    async def update_tag(self, tag_id: str, changes: Mapping[str, Any]) -> TagResult:
        result = await self.tag_repo.update_tag(tag_id, changes)
        if result is None:
            raise ResourceNotFoundException("tag", tag_id)
        return result

    async def delete_tag(self, tag_id: str) -> None:
        if not await self.tag_repo.delete_tag(tag_id):
            raise ResourceNotFoundException("tag", tag_id)
