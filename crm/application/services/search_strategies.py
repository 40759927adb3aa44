"""Per-entity search strategies used by global search.

Each strategy fetches candidate rows for one entity kind (capped at limit,
in that entity's natural order) and maps every row to a scored SearchResult.
Adding a searchable entity means adding one subclass here and registering it
in GlobalSearchService.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from crm.application.dtos.search import (
    ContactCandidate,
    InteractionCandidate,
    NoteCandidate,
    ReminderCandidate,
    SearchResult,
)
from crm.application.services.relevance import (
    DEFAULT_PREVIEW_LENGTH,
    calculate_relevance,
    create_preview,
)
from crm.domain.enums import SearchEntityType
from crm.shared.utils.datetime import format_short_date

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import ISearchRepository

DETAIL_SEPARATOR = " • "
NO_DETAILS_PREVIEW = "No additional details"
COMPLETED_PREVIEW = "✓ Completed"

RowT = TypeVar("RowT")


class EntitySearchStrategy(ABC, Generic[RowT]):
    """Fetch-then-score pipeline for one searchable entity kind."""

    entity_type: ClassVar[SearchEntityType]

    def __init__(
        self,
        search_repo: ISearchRepository,
        preview_max_length: int = DEFAULT_PREVIEW_LENGTH,
    ) -> None:
        self.search_repo = search_repo
        self.preview_max_length = preview_max_length

    async def search(self, query: str, limit: int) -> list[SearchResult]:
        """Return up to limit scored results, in the entity's fetch order."""
        rows = await self.fetch(query, limit)
        return [self.to_result(query, row) for row in rows]

    def preview(self, text: str | None) -> str:
        return create_preview(text, self.preview_max_length)

    @abstractmethod
    async def fetch(self, query: str, limit: int) -> Sequence[RowT]:
        """Load candidate rows whose searchable fields contain query."""

    @abstractmethod
    def to_result(self, query: str, row: RowT) -> SearchResult:
        """Map one candidate row to a scored SearchResult."""


class ContactSearchStrategy(EntitySearchStrategy[ContactCandidate]):
    """Contacts by first/last name, email, company, job title; ordered by name."""

    entity_type = SearchEntityType.CONTACT

    async def fetch(self, query: str, limit: int) -> Sequence[ContactCandidate]:
        return await self.search_repo.find_contacts(query, limit)

    def to_result(self, query: str, row: ContactCandidate) -> SearchResult:
        full_name = f"{row.first_name} {row.last_name}"
        details = DETAIL_SEPARATOR.join(
            part for part in (row.company, row.job_title, row.email) if part
        )
        return SearchResult(
            id=row.id,
            entity_type=self.entity_type,
            title=full_name,
            preview=details or NO_DETAILS_PREVIEW,
            relevance_score=calculate_relevance(query, full_name, details),
            created_at=row.created_at,
        )


class NoteSearchStrategy(EntitySearchStrategy[NoteCandidate]):
    """Notes by content; newest first. Notes have no title, so only content scores."""

    entity_type = SearchEntityType.NOTE

    async def fetch(self, query: str, limit: int) -> Sequence[NoteCandidate]:
        return await self.search_repo.find_notes(query, limit)

    def to_result(self, query: str, row: NoteCandidate) -> SearchResult:
        return SearchResult(
            id=row.id,
            entity_type=self.entity_type,
            title=f"Note for {row.contact_name}",
            preview=self.preview(row.content),
            relevance_score=calculate_relevance(query, None, row.content),
            created_at=row.created_at,
            contact_id=row.contact_id,
            contact_name=row.contact_name,
        )


class InteractionSearchStrategy(EntitySearchStrategy[InteractionCandidate]):
    """Interactions by subject, notes, location; most recent date first."""

    entity_type = SearchEntityType.INTERACTION

    async def fetch(self, query: str, limit: int) -> Sequence[InteractionCandidate]:
        return await self.search_repo.find_interactions(query, limit)

    def to_result(self, query: str, row: InteractionCandidate) -> SearchResult:
        type_value = row.type.value
        title = row.subject or f"{type_value} with {row.contact_name}"
        if row.notes:
            preview = self.preview(row.notes)
        else:
            preview = f"{type_value} on {format_short_date(row.date)}"
        return SearchResult(
            id=row.id,
            entity_type=self.entity_type,
            title=title,
            preview=preview,
            relevance_score=calculate_relevance(query, row.subject, row.notes),
            created_at=row.created_at,
            contact_id=row.contact_id,
            contact_name=row.contact_name,
        )


class ReminderSearchStrategy(EntitySearchStrategy[ReminderCandidate]):
    """Reminders by title, description; earliest due date first."""

    entity_type = SearchEntityType.REMINDER

    async def fetch(self, query: str, limit: int) -> Sequence[ReminderCandidate]:
        return await self.search_repo.find_reminders(query, limit)

    def to_result(self, query: str, row: ReminderCandidate) -> SearchResult:
        if row.description:
            preview = self.preview(row.description)
        elif row.is_completed:
            preview = COMPLETED_PREVIEW
        else:
            preview = f"Due {format_short_date(row.due_date)}"
        return SearchResult(
            id=row.id,
            entity_type=self.entity_type,
            title=row.title,
            preview=preview,
            relevance_score=calculate_relevance(query, row.title, row.description),
            created_at=row.created_at,
            contact_id=row.contact_id,
            contact_name=row.contact_name,
        )
