"""Tag API schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from crm.schemas.common import CamelModel

HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"


def _strip_name(v: str | None) -> str | None:
    if v is None:
        return v
    stripped = v.strip()
    if not stripped:
        raise ValueError("Tag name is required")
    return stripped


class TagCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def _name_trimmed(cls, v: str) -> str | None:
        return _strip_name(v)


class TagUpdateRequest(CamelModel):
    """Request body for updating a tag (partial)."""

    name: str | None = Field(default=None, min_length=1, max_length=50)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("must not be null")
        return _strip_name(v)


class TagResponse(CamelModel):
    id: str
    name: str
    color: str | None = None
    created_at: datetime
    contact_count: int = 0
