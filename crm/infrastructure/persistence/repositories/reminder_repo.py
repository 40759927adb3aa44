"""Reminder repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from crm.application.dtos.reminder import ReminderFilters, ReminderResult
from crm.infrastructure.persistence.models.reminder import Reminder
from crm.infrastructure.persistence.repositories.base import BaseRepository
from crm.infrastructure.persistence.repositories.contact_repo import contact_to_summary


def reminder_to_result(r: Reminder, *, with_contact: bool = False) -> ReminderResult:
    """Map ORM Reminder to application ReminderResult."""
    return ReminderResult(
        id=r.id,
        contact_id=r.contact_id,
        title=r.title,
        description=r.description,
        due_date=r.due_date,
        is_completed=r.is_completed,
        completed_at=r.completed_at,
        created_at=r.created_at,
        updated_at=r.updated_at,
        contact=contact_to_summary(r.contact) if with_contact else None,
    )


def _apply_filters(
    stmt: Select[tuple[Reminder]], filters: ReminderFilters | None
) -> Select[tuple[Reminder]]:
    if filters is None:
        return stmt
    if filters.is_completed is not None:
        stmt = stmt.where(Reminder.is_completed.is_(filters.is_completed))
    if filters.start_date is not None:
        stmt = stmt.where(Reminder.due_date >= filters.start_date)
    if filters.end_date is not None:
        stmt = stmt.where(Reminder.due_date <= filters.end_date)
    return stmt


class ReminderRepository(BaseRepository[Reminder]):
    """Reminder persistence: listings (all, per contact, upcoming, overdue), CRUD, completion."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Reminder)

    def _select_with_contact(self) -> Select[tuple[Reminder]]:
        return select(Reminder).options(joinedload(Reminder.contact))

    async def _list(
        self, stmt: Select[tuple[Reminder]], *, with_contact: bool
    ) -> list[ReminderResult]:
        result = await self.db.execute(stmt)
        return [
            reminder_to_result(r, with_contact=with_contact)
            for r in result.scalars().all()
        ]

    async def get_by_id(self, reminder_id: str) -> ReminderResult | None:
        result = await self.db.execute(
            self._select_with_contact().where(Reminder.id == reminder_id)
        )
        row = result.scalar_one_or_none()
        return reminder_to_result(row, with_contact=True) if row else None

    async def list_all(self, filters: ReminderFilters | None = None) -> list[ReminderResult]:
        """All reminders with contact summary, earliest due first."""
        stmt = _apply_filters(self._select_with_contact(), filters)
        return await self._list(stmt.order_by(Reminder.due_date.asc()), with_contact=True)

    async def list_for_contact(
        self, contact_id: str, filters: ReminderFilters | None = None
    ) -> list[ReminderResult]:
        stmt = _apply_filters(
            select(Reminder).where(Reminder.contact_id == contact_id), filters
        )
        return await self._list(stmt.order_by(Reminder.due_date.asc()), with_contact=False)

    async def list_upcoming(self, now: datetime, limit: int) -> list[ReminderResult]:
        """Incomplete reminders due at or after now, earliest first, capped at limit."""
        stmt = (
            self._select_with_contact()
            .where(Reminder.is_completed.is_(False), Reminder.due_date >= now)
            .order_by(Reminder.due_date.asc())
            .limit(limit)
        )
        return await self._list(stmt, with_contact=True)

    async def list_overdue(self, now: datetime) -> list[ReminderResult]:
        """Incomplete reminders due before now, earliest first."""
        stmt = (
            self._select_with_contact()
            .where(Reminder.is_completed.is_(False), Reminder.due_date < now)
            .order_by(Reminder.due_date.asc())
        )
        return await self._list(stmt, with_contact=True)

    async def create_reminder(
        self, contact_id: str, data: Mapping[str, Any]
    ) -> ReminderResult:
        reminder = await self.add(Reminder(contact_id=contact_id, **data))
        return reminder_to_result(reminder)

    async def update_reminder(
        self, reminder_id: str, changes: Mapping[str, Any]
    ) -> ReminderResult | None:
        reminder = await self.get_entity(reminder_id)
        if reminder is None:
            return None
        await self.apply_changes(reminder, changes)
        return reminder_to_result(reminder)

    async def delete_reminder(self, reminder_id: str) -> bool:
        reminder = await self.get_entity(reminder_id)
        if reminder is None:
            return False
        await self.remove(reminder)
        return True
