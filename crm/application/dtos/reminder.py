"""DTOs for reminder use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from crm.application.dtos.contact import ContactSummary


@dataclass(frozen=True)
class ReminderResult:
    """Reminder read-model. contact is set when the query joined the owning contact."""

    id: str
    contact_id: str
    title: str
    description: str | None
    due_date: datetime
    is_completed: bool
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime
    contact: ContactSummary | None = None


@dataclass(frozen=True)
class ReminderFilters:
    """Optional list filters: completion status and inclusive due-date range."""

    is_completed: bool | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
