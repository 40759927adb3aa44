"""DTOs for note use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from crm.application.dtos.contact import ContactSummary


@dataclass(frozen=True)
class NoteResult:
    """Note read-model. contact is set when the query joined the owning contact."""

    id: str
    contact_id: str
    content: str
    is_pinned: bool
    created_at: datetime
    updated_at: datetime
    contact: ContactSummary | None = None
