"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Update methods take a mapping of snake_case field name to new value and return
None when the record does not exist.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from crm.domain.enums import InteractionType

if TYPE_CHECKING:
    from crm.application.dtos.contact import ContactResult
    from crm.application.dtos.interaction import InteractionFilters, InteractionResult
    from crm.application.dtos.note import NoteResult
    from crm.application.dtos.reminder import ReminderFilters, ReminderResult
    from crm.application.dtos.search import (
        ContactCandidate,
        InteractionCandidate,
        NoteCandidate,
        ReminderCandidate,
    )
    from crm.application.dtos.tag import TagResult


class ISearchRepository(Protocol):
    """Protocol for global search candidate lookup (DIP)."""

    async def find_contacts(self, query: str, limit: int) -> Sequence[ContactCandidate]:
        """Contacts matching query in name, email, company or job title."""

    async def find_notes(self, query: str, limit: int) -> Sequence[NoteCandidate]:
        """Notes whose content contains query."""

    async def find_interactions(
        self, query: str, limit: int
    ) -> Sequence[InteractionCandidate]:
        """Interactions matching query in subject, notes or location."""

    async def find_reminders(
        self, query: str, limit: int
    ) -> Sequence[ReminderCandidate]:
        """Reminders matching query in title or description."""


class IContactRepository(Protocol):
    """Protocol for contact repository (DIP)."""

    async def exists(self, entity_id: str) -> bool: ...

    async def get_by_id(self, contact_id: str) -> ContactResult | None: ...

    async def list_contacts(self, tag_ids: Sequence[str] = ()) -> list[ContactResult]:
        """Contacts by last, first name; only those carrying all tag_ids when given."""

    async def list_by_tag(self, tag_id: str) -> list[ContactResult]: ...

    async def search_contacts(self, query: str) -> list[ContactResult]: ...

    async def list_companies(self) -> list[str]: ...

    async def create_contact(self, data: Mapping[str, Any]) -> ContactResult: ...

    async def update_contact(
        self, contact_id: str, changes: Mapping[str, Any]
    ) -> ContactResult | None: ...

    async def delete_contact(self, contact_id: str) -> bool: ...

    async def assign_tag(self, contact_id: str, tag_id: str) -> None:
        """Link tag to contact (idempotent)."""

    async def unassign_tag(self, contact_id: str, tag_id: str) -> bool:
        """Unlink; False when the tag was not assigned."""


class IInteractionRepository(Protocol):
    """Protocol for interaction repository (DIP)."""

    async def get_by_id(self, interaction_id: str) -> InteractionResult | None: ...

    async def list_for_contact(
        self, contact_id: str, filters: InteractionFilters | None = None
    ) -> list[InteractionResult]: ...

    async def create_interaction(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> InteractionResult: ...

    async def update_interaction(
        self, interaction_id: str, changes: Mapping[str, Any]
    ) -> InteractionResult | None: ...

    async def delete_interaction(self, interaction_id: str) -> bool: ...


class INoteRepository(Protocol):
    """Protocol for note repository (DIP)."""

    async def get_by_id(self, note_id: str) -> NoteResult | None: ...

    async def list_for_contact(self, contact_id: str) -> list[NoteResult]: ...

    async def create_note(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> NoteResult: ...

    async def update_note(
        self, note_id: str, changes: Mapping[str, Any]
    ) -> NoteResult | None: ...

    async def toggle_pin(self, note_id: str) -> NoteResult | None: ...

    async def delete_note(self, note_id: str) -> bool: ...


class IReminderRepository(Protocol):
    """Protocol for reminder repository (DIP)."""

    async def get_by_id(self, reminder_id: str) -> ReminderResult | None: ...

    async def list_all(
        self, filters: ReminderFilters | None = None
    ) -> list[ReminderResult]: ...

    async def list_for_contact(
        self, contact_id: str, filters: ReminderFilters | None = None
    ) -> list[ReminderResult]: ...

    async def list_upcoming(self, now: datetime, limit: int) -> list[ReminderResult]: ...

    async def list_overdue(self, now: datetime) -> list[ReminderResult]: ...

    async def create_reminder(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> ReminderResult: ...

    async def update_reminder(
        self, reminder_id: str, changes: Mapping[str, Any]
    ) -> ReminderResult | None: ...

    async def delete_reminder(self, reminder_id: str) -> bool: ...


class ITagRepository(Protocol):
    """Protocol for tag repository (DIP)."""

    async def exists(self, entity_id: str) -> bool: ...

    async def get_by_id(self, tag_id: str) -> TagResult | None: ...

    async def list_tags(self) -> list[TagResult]: ...

    async def create_tag(self, data: Mapping[str, Any]) -> TagResult: ...

    async def update_tag(
        self, tag_id: str, changes: Mapping[str, Any]
    ) -> TagResult | None: ...

    async def delete_tag(self, tag_id: str) -> bool: ...


class IStatsRepository(Protocol):
    """Protocol for dashboard aggregate queries (DIP)."""

    async def count_contacts(
        self,
        created_from: datetime | None = None,
        created_before: datetime | None = None,
    ) -> int: ...

    async def count_interactions(self, date_from: datetime | None = None) -> int: ...

    async def count_open_reminders(self, due_before: datetime | None = None) -> int: ...

    async def contacts_per_month(self, since: datetime) -> dict[str, int]:
        """Contact counts keyed by "YYYY-MM" for months at or after since."""

    async def interaction_type_counts(self) -> dict[InteractionType, int]: ...

    async def recent_interactions(self, limit: int) -> list[InteractionResult]: ...

    async def recent_notes(self, limit: int) -> list[NoteResult]: ...

    async def recent_reminders(self, limit: int) -> list[ReminderResult]: ...
