"""Application use cases: one entry point per workflow."""

from crm.application.use_cases.contacts import ContactService
from crm.application.use_cases.interactions import InteractionService
from crm.application.use_cases.notes import NoteService
from crm.application.use_cases.reminders import ReminderService
from crm.application.use_cases.search import GlobalSearchService
from crm.application.use_cases.stats import DashboardStatsService
from crm.application.use_cases.tags import TagService

__all__ = [
    "ContactService",
    "DashboardStatsService",
    "GlobalSearchService",
    "InteractionService",
    "NoteService",
    "ReminderService",
    "TagService",
]
