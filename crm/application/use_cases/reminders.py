"""Reminder use cases: listings, CRUD and completion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from crm.application.dtos.reminder import ReminderFilters, ReminderResult
from crm.domain.exceptions import ResourceNotFoundException
from crm.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import (
        IContactRepository,
        IReminderRepository,
    )

DEFAULT_UPCOMING_LIMIT = 5


class ReminderService:
    """Create, query and complete reminders.

    completed_at is owned here: it is stamped when a reminder becomes
    completed and cleared when it is reopened, whichever endpoint does it.
    """

    def __init__(
        self, reminder_repo: IReminderRepository, contact_repo: IContactRepository
    ) -> None:
        self.reminder_repo = reminder_repo
        self.contact_repo = contact_repo

    async def _require_contact(self, contact_id: str) -> None:
        if not await self.contact_repo.exists(contact_id):
            raise ResourceNotFoundException("contact", contact_id)

    async def list_all(
        self, filters: ReminderFilters | None = None
    ) -> list[ReminderResult]:
        return await self.reminder_repo.list_all(filters)

    async def list_upcoming(
        self, limit: int = DEFAULT_UPCOMING_LIMIT
    ) -> list[ReminderResult]:
        """Incomplete reminders due from now on, earliest first."""
        return await self.reminder_repo.list_upcoming(utc_now(), limit)

    async def list_overdue(self) -> list[ReminderResult]:
        return await self.reminder_repo.list_overdue(utc_now())

    async def list_for_contact(
        self, contact_id: str, filters: ReminderFilters | None = None
    ) -> list[ReminderResult]:
        await self._require_contact(contact_id)
        return await self.reminder_repo.list_for_contact(contact_id, filters)

    async def get_reminder(self, reminder_id: str) -> ReminderResult:
        reminder = await self.reminder_repo.get_by_id(reminder_id)
        if reminder is None:
            raise ResourceNotFoundException("reminder", reminder_id)
        return reminder

    async def create_reminder(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> ReminderResult:
        await self._require_contact(contact_id)
        values = dict(data)
        if values.get("is_completed"):
            values["completed_at"] = utc_now()
        return await self.reminder_repo.create_reminder(contact_id, values)

    async def update_reminder(
        self, reminder_id: str, changes: Mapping[str, Any]
    ) -> ReminderResult:
        values = dict(changes)
        if "is_completed" in values:
            values["completed_at"] = utc_now() if values["is_completed"] else None
        result = await self.reminder_repo.update_reminder(reminder_id, values)
        if result is None:
            raise ResourceNotFoundException("reminder", reminder_id)
        return result

    async def set_completed(self, reminder_id: str, is_completed: bool) -> ReminderResult:
        """Mark complete (stamps completed_at) or incomplete (clears it)."""
        return await self.update_reminder(reminder_id, {"is_completed": is_completed})

    async def delete_reminder(self, reminder_id: str) -> None:
        if not await self.reminder_repo.delete_reminder(reminder_id):
            raise ResourceNotFoundException("reminder", reminder_id)
