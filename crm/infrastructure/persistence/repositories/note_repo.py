"""Note repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from crm.application.dtos.note import NoteResult
from crm.infrastructure.persistence.models.note import Note
from crm.infrastructure.persistence.repositories.base import BaseRepository
from crm.infrastructure.persistence.repositories.contact_repo import contact_to_summary


def note_to_result(n: Note, *, with_contact: bool = False) -> NoteResult:
    """Map ORM Note to application NoteResult."""
    return NoteResult(
        id=n.id,
        contact_id=n.contact_id,
        content=n.content,
        is_pinned=n.is_pinned,
        created_at=n.created_at,
        updated_at=n.updated_at,
        contact=contact_to_summary(n.contact) if with_contact else None,
    )


class NoteRepository(BaseRepository[Note]):
    """Note persistence: per-contact listing (pinned first), CRUD, pin toggle."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Note)

    async def get_by_id(self, note_id: str) -> NoteResult | None:
        result = await self.db.execute(
            select(Note).options(joinedload(Note.contact)).where(Note.id == note_id)
        )
        row = result.scalar_one_or_none()
        return note_to_result(row, with_contact=True) if row else None

    async def list_for_contact(self, contact_id: str) -> list[NoteResult]:
        """Notes of one contact: pinned first, then newest first."""
        result = await self.db.execute(
            select(Note)
            .where(Note.contact_id == contact_id)
            .order_by(Note.is_pinned.desc(), Note.created_at.desc())
        )
        return [note_to_result(n) for n in result.scalars().all()]

    async def create_note(self, contact_id: str, data: Mapping[str, Any]) -> NoteResult:
        note = await self.add(Note(contact_id=contact_id, **data))
        return note_to_result(note)

    async def update_note(
        self, note_id: str, changes: Mapping[str, Any]
    ) -> NoteResult | None:
        note = await self.get_entity(note_id)
        if note is None:
            return None
        await self.apply_changes(note, changes)
        return note_to_result(note)

    async def toggle_pin(self, note_id: str) -> NoteResult | None:
        """Flip is_pinned; return the updated note or None if not found."""
        note = await self.get_entity(note_id)
        if note is None:
            return None
        await self.apply_changes(note, {"is_pinned": not note.is_pinned})
        return note_to_result(note)

    async def delete_note(self, note_id: str) -> bool:
        note = await self.get_entity(note_id)
        if note is None:
            return False
        await self.remove(note)
        return True
