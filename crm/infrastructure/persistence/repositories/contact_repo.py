"""Contact repository. Returns application DTOs; tags are always eager-loaded."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from crm.application.dtos.contact import ContactResult, ContactSummary, TagSummary
from crm.domain.exceptions import DuplicateEmailException
from crm.infrastructure.persistence.models.contact import Contact
from crm.infrastructure.persistence.models.tag import ContactTag
from crm.infrastructure.persistence.repositories.base import BaseRepository
from crm.infrastructure.persistence.repositories.search_repo import (
    contains_pattern,
    like_pattern,
)


def contact_to_summary(c: Contact) -> ContactSummary:
    """Map ORM Contact to the id + name reference embedded in other entities."""
    return ContactSummary(id=c.id, first_name=c.first_name, last_name=c.last_name)


def _contact_to_result(c: Contact) -> ContactResult:
    """Map ORM Contact (tags loaded) to application ContactResult."""
    return ContactResult(
        id=c.id,
        first_name=c.first_name,
        last_name=c.last_name,
        email=c.email,
        phone=c.phone,
        social_media=c.social_media,
        company=c.company,
        job_title=c.job_title,
        address=c.address,
        birthday=c.birthday,
        created_at=c.created_at,
        updated_at=c.updated_at,
        tags=tuple(TagSummary(id=t.id, name=t.name, color=t.color) for t in c.tags),
    )


def _is_email_conflict(error: IntegrityError) -> bool:
    return "email" in str(error.orig).lower()


class ContactRepository(BaseRepository[Contact]):
    """Contact persistence: CRUD, list/filter by tags, simple search, tag links."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Contact)

    def _select_with_tags(self):
        return (
            select(Contact)
            .options(selectinload(Contact.tags))
            .execution_options(populate_existing=True)
        )

    async def get_by_id(self, contact_id: str) -> ContactResult | None:
        result = await self.db.execute(
            self._select_with_tags().where(Contact.id == contact_id)
        )
        row = result.scalar_one_or_none()
        return _contact_to_result(row) if row else None

    async def list_contacts(self, tag_ids: Sequence[str] = ()) -> list[ContactResult]:
        """Return contacts ordered by last, first name; when tag_ids is given, only
        contacts carrying every one of those tags."""
        stmt = self._select_with_tags()
        for tag_id in tag_ids:
            stmt = stmt.where(
                Contact.id.in_(
                    select(ContactTag.contact_id).where(ContactTag.tag_id == tag_id)
                )
            )
        stmt = stmt.order_by(Contact.last_name.asc(), Contact.first_name.asc())
        result = await self.db.execute(stmt)
        return [_contact_to_result(c) for c in result.scalars().all()]

    async def list_by_tag(self, tag_id: str) -> list[ContactResult]:
        return await self.list_contacts([tag_id])

    async def search_contacts(self, query: str) -> list[ContactResult]:
        """Contacts whose name, email or company contain query (case-insensitive)."""
        pattern = like_pattern(query)
        result = await self.db.execute(
            self._select_with_tags()
            .where(
                or_(
                    contains_pattern(Contact.first_name, pattern),
                    contains_pattern(Contact.last_name, pattern),
                    contains_pattern(Contact.email, pattern),
                    contains_pattern(Contact.company, pattern),
                )
            )
            .order_by(Contact.last_name.asc(), Contact.first_name.asc())
        )
        return [_contact_to_result(c) for c in result.scalars().all()]

    async def list_companies(self) -> list[str]:
        """Distinct non-empty company names, alphabetical."""
        result = await self.db.execute(
            select(Contact.company)
            .where(Contact.company.is_not(None), func.length(Contact.company) > 0)
            .distinct()
            .order_by(Contact.company.asc())
        )
        return list(result.scalars().all())

    async def create_contact(self, data: Mapping[str, Any]) -> ContactResult:
        """Insert a contact; raise DuplicateEmailException on email conflict."""
        try:
            contact = await self.add(Contact(**data))
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise DuplicateEmailException() from e
            raise
        created = await self.get_by_id(contact.id)
        assert created is not None
        return created

    async def update_contact(
        self, contact_id: str, changes: Mapping[str, Any]
    ) -> ContactResult | None:
        """Apply changes; return updated contact or None if not found."""
        contact = await self.get_entity(contact_id)
        if contact is None:
            return None
        try:
            await self.apply_changes(contact, changes)
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise DuplicateEmailException() from e
            raise
        return await self.get_by_id(contact_id)

    async def delete_contact(self, contact_id: str) -> bool:
        """Delete contact (interactions, notes, reminders, tag links cascade in the DB)."""
        contact = await self.get_entity(contact_id)
        if contact is None:
            return False
        await self.remove(contact)
        return True

    async def assign_tag(self, contact_id: str, tag_id: str) -> None:
        """Link tag to contact; no-op when already linked."""
        existing = await self.db.execute(
            select(ContactTag.contact_id).where(
                ContactTag.contact_id == contact_id, ContactTag.tag_id == tag_id
            )
        )
        if existing.scalar_one_or_none() is not None:
            return
        self.db.add(ContactTag(contact_id=contact_id, tag_id=tag_id))
        await self.db.flush()

    async def unassign_tag(self, contact_id: str, tag_id: str) -> bool:
        """Remove the link; return False when the tag was not assigned."""
        result = await self.db.execute(
            delete(ContactTag).where(
                ContactTag.contact_id == contact_id, ContactTag.tag_id == tag_id
            )
        )
        return (result.rowcount or 0) > 0
