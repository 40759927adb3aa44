"""Interaction API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from crm.domain.enums import InteractionType
from crm.schemas.common import CamelModel, blank_to_none, utc_or_none
from crm.schemas.contact import ContactSummaryResponse


class _InteractionFields(CamelModel):
    subject: str | None = Field(default=None, max_length=500)
    notes: str | None = None
    date: datetime | None = Field(default=None, description="Defaults to now")
    duration: int | None = Field(default=None, gt=0, description="Minutes")
    location: str | None = Field(default=None, max_length=500)

    @field_validator("subject", "notes", "location", "date", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator("date")
    @classmethod
    def _date_utc(cls, v: datetime | None) -> datetime | None:
        return utc_or_none(v)


class InteractionCreateRequest(_InteractionFields):
    """Request body for logging an interaction against a contact."""

    type: InteractionType


class InteractionUpdateRequest(_InteractionFields):
    """Request body for updating an interaction (partial)."""

    type: InteractionType | None = None

    @field_validator("type", "date")
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("must not be null")
        return v


class InteractionResponse(CamelModel):
    id: str
    contact_id: str
    type: InteractionType
    subject: str | None = None
    notes: str | None = None
    date: datetime
    duration: int | None = None
    location: str | None = None
    created_at: datetime
    updated_at: datetime
    contact: ContactSummaryResponse | None = None
