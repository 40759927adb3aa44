"""Pydantic request/response schemas for the API."""

from crm.schemas.common import ApiResponse, ErrorResponse, MessageData
from crm.schemas.contact import (
    ContactCreateRequest,
    ContactResponse,
    ContactUpdateRequest,
    TagAssignRequest,
)
from crm.schemas.health import HealthResponse
from crm.schemas.interaction import (
    InteractionCreateRequest,
    InteractionResponse,
    InteractionUpdateRequest,
)
from crm.schemas.note import NoteCreateRequest, NoteResponse, NoteUpdateRequest
from crm.schemas.reminder import (
    ReminderCompleteRequest,
    ReminderCreateRequest,
    ReminderResponse,
    ReminderUpdateRequest,
)
from crm.schemas.search import GlobalSearchResponseSchema, SearchResultResponse
from crm.schemas.stats import (
    ContactGrowthResponse,
    DashboardStatsResponse,
    InteractionBreakdownResponse,
    RecentActivityResponse,
)
from crm.schemas.tag import TagCreateRequest, TagResponse, TagUpdateRequest

__all__ = [
    "ApiResponse",
    "ContactCreateRequest",
    "ContactGrowthResponse",
    "ContactResponse",
    "ContactUpdateRequest",
    "DashboardStatsResponse",
    "ErrorResponse",
    "GlobalSearchResponseSchema",
    "HealthResponse",
    "InteractionBreakdownResponse",
    "InteractionCreateRequest",
    "InteractionResponse",
    "InteractionUpdateRequest",
    "MessageData",
    "NoteCreateRequest",
    "NoteResponse",
    "NoteUpdateRequest",
    "RecentActivityResponse",
    "ReminderCompleteRequest",
    "ReminderCreateRequest",
    "ReminderResponse",
    "ReminderUpdateRequest",
    "SearchResultResponse",
    "TagAssignRequest",
    "TagCreateRequest",
    "TagResponse",
    "TagUpdateRequest",
]
