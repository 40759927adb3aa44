"""Contact API schemas."""

from datetime import datetime
from typing import Any

from pydantic import EmailStr, Field, field_validator

from crm.schemas.common import CamelModel, blank_to_none, utc_or_none

# Optional free-text fields where "" from a form means "clear the value"
_OPTIONAL_TEXT = ("email", "phone", "company", "job_title", "address", "birthday")


class _ContactFields(CamelModel):
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=64)
    social_media: dict[str, str] | None = Field(
        default=None, description='Platform to handle, e.g. {"twitter": "@user"}'
    )
    company: str | None = Field(default=None, max_length=255)
    job_title: str | None = Field(default=None, max_length=255)
    address: str | None = None
    birthday: datetime | None = None

    @field_validator(*_OPTIONAL_TEXT, mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator("social_media")
    @classmethod
    def _empty_map_to_none(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        return v or None

    @field_validator("birthday")
    @classmethod
    def _birthday_utc(cls, v: datetime | None) -> datetime | None:
        return utc_or_none(v)


class ContactCreateRequest(_ContactFields):
    """Request body for creating a contact."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)


class ContactUpdateRequest(_ContactFields):
    """Request body for updating a contact (partial; only sent fields change)."""

    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)

    @field_validator("first_name", "last_name")
    @classmethod
    def _names_not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("must not be null")
        return v


class TagAssignRequest(CamelModel):
    """Request body for POST /contacts/{id}/tags."""

    tag_id: str = Field(..., min_length=1)


class ContactTagResponse(CamelModel):
    id: str
    name: str
    color: str | None = None


class ContactSummaryResponse(CamelModel):
    """Owning contact embedded in interactions, notes and reminders."""

    id: str
    first_name: str
    last_name: str


class ContactResponse(CamelModel):
    """Contact with its tags."""

    id: str
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    social_media: dict[str, str] | None = None
    company: str | None = None
    job_title: str | None = None
    address: str | None = None
    birthday: datetime | None = None
    created_at: datetime
    updated_at: datetime
    tags: list[ContactTagResponse] = Field(default_factory=list)
