"""DTOs for interaction use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from crm.application.dtos.contact import ContactSummary
from crm.domain.enums import InteractionType


@dataclass(frozen=True)
class InteractionResult:
    """Interaction read-model. contact is set when the query joined the owning contact."""

    id: str
    contact_id: str
    type: InteractionType
    subject: str | None
    notes: str | None
    date: datetime
    duration: int | None
    location: str | None
    created_at: datetime
    updated_at: datetime
    contact: ContactSummary | None = None


@dataclass(frozen=True)
class InteractionFilters:
    """Optional list filters: exact type and inclusive date range."""

    type: InteractionType | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
