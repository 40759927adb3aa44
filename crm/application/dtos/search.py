"""DTOs for global search: candidate rows fetched per entity and the ranked response."""

from dataclasses import dataclass, field
from datetime import datetime

from crm.domain.enums import InteractionType, SearchEntityType


@dataclass(frozen=True)
class ContactCandidate:
    """Contact row matched by a search query (only the fields search needs)."""

    id: str
    first_name: str
    last_name: str
    email: str | None
    company: str | None
    job_title: str | None
    created_at: datetime


@dataclass(frozen=True)
class NoteCandidate:
    """Note row matched by a search query, with the owning contact's name."""

    id: str
    content: str
    created_at: datetime
    contact_id: str
    contact_name: str


@dataclass(frozen=True)
class InteractionCandidate:
    """Interaction row matched by a search query, with the owning contact's name."""

    id: str
    type: InteractionType
    subject: str | None
    notes: str | None
    date: datetime
    created_at: datetime
    contact_id: str
    contact_name: str


@dataclass(frozen=True)
class ReminderCandidate:
    """Reminder row matched by a search query, with the owning contact's name."""

    id: str
    title: str
    description: str | None
    due_date: datetime
    is_completed: bool
    created_at: datetime
    contact_id: str
    contact_name: str


@dataclass(frozen=True)
class SearchResult:
    """One ranked search hit. contact_id/contact_name are None for contact hits."""

    id: str
    entity_type: SearchEntityType
    title: str
    preview: str
    relevance_score: int
    created_at: datetime
    contact_id: str | None = None
    contact_name: str | None = None


@dataclass(frozen=True)
class GlobalSearchResponse:
    """Global search output: trimmed query, count, results by descending relevance."""

    query: str
    total_results: int
    results: list[SearchResult] = field(default_factory=list)
