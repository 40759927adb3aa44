"""Global search API schemas."""

from datetime import datetime

from pydantic import Field

from crm.domain.enums import SearchEntityType
from crm.schemas.common import CamelModel


class SearchResultResponse(CamelModel):
    """Single search hit. contactId/contactName are omitted for contact hits."""

    id: str
    entity_type: SearchEntityType
    title: str
    preview: str
    relevance_score: int
    contact_id: str | None = None
    contact_name: str | None = None
    created_at: datetime


class GlobalSearchResponseSchema(CamelModel):
    """Ranked results across contacts, notes, interactions and reminders."""

    query: str = Field(..., description="Trimmed query")
    total_results: int
    results: list[SearchResultResponse] = Field(default_factory=list)
