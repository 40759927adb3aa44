"""Reminder API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from crm.schemas.common import CamelModel, blank_to_none, utc_or_none
from crm.schemas.contact import ContactSummaryResponse


class ReminderCreateRequest(CamelModel):
    """Request body for creating a reminder for a contact."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    due_date: datetime
    is_completed: bool = False

    @field_validator("description", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator("due_date")
    @classmethod
    def _due_utc(cls, v: datetime) -> datetime:
        return utc_or_none(v)


class ReminderUpdateRequest(CamelModel):
    """Request body for updating a reminder (partial)."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    due_date: datetime | None = None
    is_completed: bool | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator("title", "due_date", "is_completed")
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must not be null")
        return utc_or_none(v) if isinstance(v, datetime) else v


class ReminderCompleteRequest(CamelModel):
    """Request body for PATCH /reminders/{id}/complete."""

    is_completed: bool = False


class ReminderResponse(CamelModel):
    id: str
    contact_id: str
    title: str
    description: str | None = None
    due_date: datetime
    is_completed: bool
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    contact: ContactSummaryResponse | None = None
