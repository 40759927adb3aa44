"""Search repository: case-insensitive substring matching for global search.

Each find_* method opens its own session from the session factory so the four
entity fetches of one global search can run concurrently.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from crm.application.dtos.search import (
    ContactCandidate,
    InteractionCandidate,
    NoteCandidate,
    ReminderCandidate,
)
from crm.infrastructure.persistence.models.contact import Contact
from crm.infrastructure.persistence.models.interaction import Interaction
from crm.infrastructure.persistence.models.note import Note
from crm.infrastructure.persistence.models.reminder import Reminder


def like_pattern(query: str) -> str:
    """Return an ILIKE substring pattern that matches query literally."""
    # Escape ILIKE wildcards % and _ so query is literal
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def contains_pattern(column: Any, pattern: str) -> ColumnElement[bool]:
    """column ILIKE pattern, with like_pattern's backslash escapes honoured."""
    return column.ilike(pattern, escape="\\")


class SearchRepository:
    """Candidate lookup for contacts, notes, interactions and reminders."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def find_contacts(self, query: str, limit: int) -> list[ContactCandidate]:
        """Contacts whose name, email, company or job title contain query; by last, first name."""
        pattern = like_pattern(query)
        stmt = (
            select(Contact)
            .where(
                or_(
                    contains_pattern(Contact.first_name, pattern),
                    contains_pattern(Contact.last_name, pattern),
                    contains_pattern(Contact.email, pattern),
                    contains_pattern(Contact.company, pattern),
                    contains_pattern(Contact.job_title, pattern),
                )
            )
            .order_by(Contact.last_name.asc(), Contact.first_name.asc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                ContactCandidate(
                    id=c.id,
                    first_name=c.first_name,
                    last_name=c.last_name,
                    email=c.email,
                    company=c.company,
                    job_title=c.job_title,
                    created_at=c.created_at,
                )
                for c in result.scalars().all()
            ]

    async def find_notes(self, query: str, limit: int) -> list[NoteCandidate]:
        """Notes whose content contains query; newest first."""
        stmt = (
            select(Note, Contact.first_name, Contact.last_name)
            .join(Contact, Note.contact_id == Contact.id)
            .where(contains_pattern(Note.content, like_pattern(query)))
            .order_by(Note.created_at.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                NoteCandidate(
                    id=note.id,
                    content=note.content,
                    created_at=note.created_at,
                    contact_id=note.contact_id,
                    contact_name=f"{first_name} {last_name}",
                )
                for note, first_name, last_name in result.all()
            ]

    async def find_interactions(
        self, query: str, limit: int
    ) -> list[InteractionCandidate]:
        """Interactions whose subject, notes or location contain query; latest date first."""
        pattern = like_pattern(query)
        stmt = (
            select(Interaction, Contact.first_name, Contact.last_name)
            .join(Contact, Interaction.contact_id == Contact.id)
            .where(
                or_(
                    contains_pattern(Interaction.subject, pattern),
                    contains_pattern(Interaction.notes, pattern),
                    contains_pattern(Interaction.location, pattern),
                )
            )
            .order_by(Interaction.date.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                InteractionCandidate(
                    id=i.id,
                    type=i.type,
                    subject=i.subject,
                    notes=i.notes,
                    date=i.date,
                    created_at=i.created_at,
                    contact_id=i.contact_id,
                    contact_name=f"{first_name} {last_name}",
                )
                for i, first_name, last_name in result.all()
            ]

    async def find_reminders(self, query: str, limit: int) -> list[ReminderCandidate]:
        """Reminders whose title or description contain query; earliest due first."""
        pattern = like_pattern(query)
        stmt = (
            select(Reminder, Contact.first_name, Contact.last_name)
            .join(Contact, Reminder.contact_id == Contact.id)
            .where(
                or_(
                    contains_pattern(Reminder.title, pattern),
                    contains_pattern(Reminder.description, pattern),
                )
            )
            .order_by(Reminder.due_date.asc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                ReminderCandidate(
                    id=r.id,
                    title=r.title,
                    description=r.description,
                    due_date=r.due_date,
                    is_completed=r.is_completed,
                    created_at=r.created_at,
                    contact_id=r.contact_id,
                    contact_name=f"{first_name} {last_name}",
                )
                for r, first_name, last_name in result.all()
            ]
