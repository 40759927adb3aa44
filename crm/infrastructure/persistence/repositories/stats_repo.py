"""Stats repository: aggregate counts for the dashboard.

Like SearchRepository, every method opens its own session so the dashboard
use case can run the counts concurrently.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import joinedload

from crm.application.dtos.interaction import InteractionResult
from crm.application.dtos.note import NoteResult
from crm.application.dtos.reminder import ReminderResult
from crm.domain.enums import InteractionType
from crm.infrastructure.persistence.models.contact import Contact
from crm.infrastructure.persistence.models.interaction import Interaction
from crm.infrastructure.persistence.models.note import Note
from crm.infrastructure.persistence.models.reminder import Reminder
from crm.infrastructure.persistence.repositories.interaction_repo import (
    interaction_to_result,
)
from crm.infrastructure.persistence.repositories.note_repo import note_to_result
from crm.infrastructure.persistence.repositories.reminder_repo import (
    reminder_to_result,
)


class StatsRepository:
    """Counts and recent-item queries over contacts, interactions, notes, reminders."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def _scalar(self, stmt: Any) -> int:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar() or 0

    async def count_contacts(
        self,
        created_from: datetime | None = None,
        created_before: datetime | None = None,
    ) -> int:
        """Contacts with created_from <= created_at < created_before (bounds optional)."""
        stmt = select(func.count(Contact.id))
        if created_from is not None:
            stmt = stmt.where(Contact.created_at >= created_from)
        if created_before is not None:
            stmt = stmt.where(Contact.created_at < created_before)
        return await self._scalar(stmt)

    async def count_interactions(self, date_from: datetime | None = None) -> int:
        stmt = select(func.count(Interaction.id))
        if date_from is not None:
            stmt = stmt.where(Interaction.date >= date_from)
        return await self._scalar(stmt)

    async def count_open_reminders(self, due_before: datetime | None = None) -> int:
        """Incomplete reminders, optionally only those due before due_before."""
        stmt = select(func.count(Reminder.id)).where(Reminder.is_completed.is_(False))
        if due_before is not None:
            stmt = stmt.where(Reminder.due_date < due_before)
        return await self._scalar(stmt)

    async def contacts_per_month(self, since: datetime) -> dict[str, int]:
        """Contacts created at or after since, grouped by UTC month ("YYYY-MM")."""
        month = func.to_char(func.timezone("UTC", Contact.created_at), "YYYY-MM")
        stmt = (
            select(month, func.count(Contact.id))
            .where(Contact.created_at >= since)
            .group_by(month)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return {label: count for label, count in result.all()}

    async def interaction_type_counts(self) -> dict[InteractionType, int]:
        """Interaction counts per type; types with no rows are absent."""
        stmt = select(Interaction.type, func.count(Interaction.id)).group_by(
            Interaction.type
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return {itype: count for itype, count in result.all()}

    async def recent_interactions(self, limit: int) -> list[InteractionResult]:
        """Most recently created interactions with contact summary."""
        stmt = (
            select(Interaction)
            .options(joinedload(Interaction.contact))
            .order_by(Interaction.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                interaction_to_result(i, with_contact=True)
                for i in result.scalars().all()
            ]

    async def recent_notes(self, limit: int) -> list[NoteResult]:
        stmt = (
            select(Note)
            .options(joinedload(Note.contact))
            .order_by(Note.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [note_to_result(n, with_contact=True) for n in result.scalars().all()]

    async def recent_reminders(self, limit: int) -> list[ReminderResult]:
        stmt = (
            select(Reminder)
            .options(joinedload(Reminder.contact))
            .order_by(Reminder.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                reminder_to_result(r, with_contact=True) for r in result.scalars().all()
            ]
