"""Note use cases: per-contact listing, CRUD and pinning."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from crm.application.dtos.note import NoteResult
from crm.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import (
        IContactRepository,
        INoteRepository,
    )


class NoteService:
    def __init__(
        self, note_repo: INoteRepository, contact_repo: IContactRepository
    ) -> None:
        self.note_repo = note_repo
        self.contact_repo = contact_repo

    async def list_for_contact(self, contact_id: str) -> list[NoteResult]:
        """Notes of a contact, pinned first then newest first."""
        if not await self.contact_repo.exists(contact_id):
            raise ResourceNotFoundException("contact", contact_id)
        return await self.note_repo.list_for_contact(contact_id)

    async def get_note(self, note_id: str) -> NoteResult:
        note = await self.note_repo.get_by_id(note_id)
        if note is None:
            raise ResourceNotFoundException("note", note_id)
        return note

    async def create_note(self, contact_id: str, data: Mapping[str, Any]) -> NoteResult:
        if not await self.contact_repo.exists(contact_id):
            raise ResourceNotFoundException("contact", contact_id)
        return await self.note_repo.create_note(contact_id, data)

    async def update_note(self, note_id: str, changes: Mapping[str, Any]) -> NoteResult:
        result = await self.note_repo.update_note(note_id, changes)
        if result is None:
            raise ResourceNotFoundException("note", note_id)
        return result

    async def toggle_pin(self, note_id: str) -> NoteResult:
        result = await self.note_repo.toggle_pin(note_id)
        if result is None:
            raise ResourceNotFoundException("note", note_id)
        return result

    async def delete_note(self, note_id: str) -> None:
        if not await self.note_repo.delete_note(note_id):
            raise ResourceNotFoundException("note", note_id)
