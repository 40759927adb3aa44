"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application use cases.
All use cases are built from infrastructure implementations here; routes
depend only on these dependencies, not on infra directly. Tests replace them
through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from crm.application.use_cases import (
    ContactService,
    DashboardStatsService,
    GlobalSearchService,
    InteractionService,
    NoteService,
    ReminderService,
    TagService,
)
from crm.core.config import get_settings
from crm.infrastructure.persistence.database import (
    get_db_transactional,
    get_session_factory,
)
from crm.infrastructure.persistence.repositories import (
    ContactRepository,
    InteractionRepository,
    NoteRepository,
    ReminderRepository,
    SearchRepository,
    StatsRepository,
    TagRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db_transactional)]


def get_search_repo(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> SearchRepository:
    """Search repository; opens one session per entity fetch."""
    return SearchRepository(session_factory)


def get_global_search_service(
    search_repo: Annotated[SearchRepository, Depends(get_search_repo)],
) -> GlobalSearchService:
    """Global search use case (contacts, notes, interactions, reminders)."""
    return GlobalSearchService(
        search_repo, preview_max_length=get_settings().preview_max_length
    )


def get_stats_service(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> DashboardStatsService:
    """Dashboard stats use case (concurrent counts, one session each)."""
    return DashboardStatsService(StatsRepository(session_factory))


def get_contact_service(db: DbSession) -> ContactService:
    """Contact service (transactional; repos share the request session)."""
    return ContactService(ContactRepository(db), TagRepository(db))


def get_interaction_service(db: DbSession) -> InteractionService:
    return InteractionService(InteractionRepository(db), ContactRepository(db))


def get_note_service(db: DbSession) -> NoteService:
    return NoteService(NoteRepository(db), ContactRepository(db))


def get_reminder_service(db: DbSession) -> ReminderService:
    return ReminderService(ReminderRepository(db), ContactRepository(db))


def get_tag_service(db: DbSession) -> TagService:
    return TagService(TagRepository(db))
