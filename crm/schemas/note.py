"""Note API schemas."""

from datetime import datetime

from pydantic import Field

from crm.schemas.common import CamelModel
from crm.schemas.contact import ContactSummaryResponse


class NoteCreateRequest(CamelModel):
    content: str = Field(..., min_length=1)
    is_pinned: bool = False


class NoteUpdateRequest(CamelModel):
    """Request body for updating a note (partial)."""

    content: str | None = Field(default=None, min_length=1)
    is_pinned: bool | None = None


class NoteResponse(CamelModel):
    id: str
    contact_id: str
    content: str
    is_pinned: bool
    created_at: datetime
    updated_at: datetime
    contact: ContactSummaryResponse | None = None
