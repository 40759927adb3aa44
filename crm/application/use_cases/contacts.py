"""Contact use cases: CRUD, listing, simple search and tag assignment."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from crm.application.dtos.contact import ContactResult
from crm.domain.exceptions import ResourceNotFoundException, TagNotAssignedException

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import (
        IContactRepository,
        ITagRepository,
    )


class ContactService:
    """Create, query, update and delete contacts; link and unlink tags."""

    def __init__(
        self, contact_repo: IContactRepository, tag_repo: ITagRepository
    ) -> None:
        self.contact_repo = contact_repo
        self.tag_repo = tag_repo

    async def list_contacts(self, tag_ids: Sequence[str] = ()) -> list[ContactResult]:
        """All contacts by last, first name; with tag_ids, only those carrying every tag."""
        return await self.contact_repo.list_contacts(tag_ids)

    async def search_contacts(self, query: str) -> list[ContactResult]:
        return await self.contact_repo.search_contacts(query)

    async def list_companies(self) -> list[str]:
        return await self.contact_repo.list_companies()

    async def get_contact(self, contact_id: str) -> ContactResult:
        """Return contact with tags; raise ResourceNotFoundException if missing."""
        contact = await self.contact_repo.get_by_id(contact_id)
        if contact is None:
            raise ResourceNotFoundException("contact", contact_id)
        return contact

    async def create_contact(self, data: Mapping[str, Any]) -> ContactResult:
        return await self.contact_repo.create_contact(data)

    async def update_contact(
        self, contact_id: str, changes: Mapping[str, Any]
    ) -> ContactResult:
        result = await self.contact_repo.update_contact(contact_id, changes)
        if result is None:
            raise ResourceNotFoundException("contact", contact_id)
        return result

    async def delete_contact(self, contact_id: str) -> None:
        if not await self.contact_repo.delete_contact(contact_id):
            raise ResourceNotFoundException("contact", contact_id)

    async def add_tag(self, contact_id: str, tag_id: str) -> ContactResult:
        """Assign tag to contact (no-op if already assigned); return updated contact."""
        if not await self.contact_repo.exists(contact_id):
            raise ResourceNotFoundException("contact", contact_id)
        if not await self.tag_repo.exists(tag_id):
            raise ResourceNotFoundException("tag", tag_id)
        await self.contact_repo.assign_tag(contact_id, tag_id)
        return await self.get_contact(contact_id)

    async def remove_tag(self, contact_id: str, tag_id: str) -> ContactResult:
        """Unassign tag; raise TagNotAssignedException when the link does not exist."""
        if not await self.contact_repo.exists(contact_id):
            raise ResourceNotFoundException("contact", contact_id)
        if not await self.contact_repo.unassign_tag(contact_id, tag_id):
            raise TagNotAssignedException(contact_id, tag_id)
        return await self.get_contact(contact_id)

    async def list_contacts_for_tag(self, tag_id: str) -> list[ContactResult]:
        if not await self.tag_repo.exists(tag_id):
            raise ResourceNotFoundException("tag", tag_id)
        return await self.contact_repo.list_by_tag(tag_id)
