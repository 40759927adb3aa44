"""Shared API schema pieces: camelCase base model and response envelopes.

Every JSON body uses camelCase keys; request bodies also accept snake_case.
Success bodies are {"success": true, "data": ...}; errors are
{"success": false, "error": {"message", "code", "details"?}}.
"""

from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from crm.shared.utils.datetime import ensure_utc

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for API schemas: camelCase aliases, populated from DTO attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""

    success: Literal[True] = True
    data: T


class MessageData(BaseModel):
    message: str


class ErrorBody(BaseModel):
    message: str
    code: str
    details: dict[str, Any] | list[Any] | None = None


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    success: Literal[False] = False
    error: ErrorBody


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings from forms as absent values."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def utc_or_none(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes from the client."""
    return ensure_utc(value)


def deleted(resource: str) -> ApiResponse[MessageData]:
    """Envelope for a successful DELETE (e.g. "Contact deleted successfully")."""
    return ApiResponse(data=MessageData(message=f"{resource} deleted successfully"))


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Server error"},
}
