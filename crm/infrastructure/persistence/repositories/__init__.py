"""SQLAlchemy repositories. Each returns application DTOs, never ORM instances."""

from crm.infrastructure.persistence.repositories.contact_repo import ContactRepository
from crm.infrastructure.persistence.repositories.interaction_repo import (
    InteractionRepository,
)
from crm.infrastructure.persistence.repositories.note_repo import NoteRepository
from crm.infrastructure.persistence.repositories.reminder_repo import ReminderRepository
from crm.infrastructure.persistence.repositories.search_repo import SearchRepository
from crm.infrastructure.persistence.repositories.stats_repo import StatsRepository
from crm.infrastructure.persistence.repositories.tag_repo import TagRepository

__all__ = [
    "ContactRepository",
    "InteractionRepository",
    "NoteRepository",
    "ReminderRepository",
    "SearchRepository",
    "StatsRepository",
    "TagRepository",
]
