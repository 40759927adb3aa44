"""Reminders API: listings (all, upcoming, overdue, per contact), CRUD, completion."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from crm.api.v1.dependencies import get_reminder_service
from crm.application.dtos.reminder import ReminderFilters
from crm.application.use_cases.reminders import ReminderService
from crm.core.config import get_settings
from crm.core.limiter import limit_writes
from crm.schemas.common import ERROR_RESPONSES, ApiResponse, MessageData, deleted
from crm.schemas.reminder import (
    ReminderCompleteRequest,
    ReminderCreateRequest,
    ReminderResponse,
    ReminderUpdateRequest,
)
from crm.shared.utils.datetime import ensure_utc

router = APIRouter()

ReminderSvc = Annotated[ReminderService, Depends(get_reminder_service)]


def reminder_filters(
    is_completed: Annotated[bool | None, Query(alias="isCompleted")] = None,
    start_date: Annotated[datetime | None, Query(alias="startDate")] = None,
    end_date: Annotated[datetime | None, Query(alias="endDate")] = None,
) -> ReminderFilters:
    """Query-string filters shared by the reminder list routes (due date range)."""
    return ReminderFilters(
        is_completed=is_completed,
        start_date=ensure_utc(start_date),
        end_date=ensure_utc(end_date),
    )


Filters = Annotated[ReminderFilters, Depends(reminder_filters)]


def _many(reminders) -> ApiResponse[list[ReminderResponse]]:
    return ApiResponse(data=[ReminderResponse.model_validate(r) for r in reminders])


@router.get("/reminders", response_model=ApiResponse[list[ReminderResponse]])
async def list_reminders(reminder_svc: ReminderSvc, filters: Filters):
    """All reminders with their contact, earliest due first."""
    return _many(await reminder_svc.list_all(filters))


@router.get("/reminders/upcoming", response_model=ApiResponse[list[ReminderResponse]])
async def list_upcoming_reminders(
    reminder_svc: ReminderSvc,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
):
    """Incomplete reminders due from now on (dashboard widget)."""
    limit = limit or get_settings().upcoming_reminders_default_limit
    return _many(await reminder_svc.list_upcoming(limit))


@router.get("/reminders/overdue", response_model=ApiResponse[list[ReminderResponse]])
async def list_overdue_reminders(reminder_svc: ReminderSvc):
    return _many(await reminder_svc.list_overdue())


@router.get(
    "/contacts/{contact_id}/reminders",
    response_model=ApiResponse[list[ReminderResponse]],
    responses=ERROR_RESPONSES,
)
async def list_contact_reminders(
    contact_id: str, reminder_svc: ReminderSvc, filters: Filters
):
    return _many(await reminder_svc.list_for_contact(contact_id, filters))


@router.post(
    "/contacts/{contact_id}/reminders",
    response_model=ApiResponse[ReminderResponse],
    status_code=201,
    responses=ERROR_RESPONSES,
)
@limit_writes
async def create_reminder(
    request: Request,
    contact_id: str,
    body: ReminderCreateRequest,
    reminder_svc: ReminderSvc,
):
    created = await reminder_svc.create_reminder(
        contact_id, body.model_dump(exclude_none=True)
    )
    return ApiResponse(data=ReminderResponse.model_validate(created))


@router.get(
    "/reminders/{reminder_id}",
    response_model=ApiResponse[ReminderResponse],
    responses=ERROR_RESPONSES,
)
async def get_reminder(reminder_id: str, reminder_svc: ReminderSvc):
    reminder = await reminder_svc.get_reminder(reminder_id)
    return ApiResponse(data=ReminderResponse.model_validate(reminder))


@router.put(
    "/reminders/{reminder_id}",
    response_model=ApiResponse[ReminderResponse],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def update_reminder(
    request: Request,
    reminder_id: str,
    body: ReminderUpdateRequest,
    reminder_svc: ReminderSvc,
):
    updated = await reminder_svc.update_reminder(
        reminder_id, body.model_dump(exclude_unset=True)
    )
    return ApiResponse(data=ReminderResponse.model_validate(updated))


@router.patch(
    "/reminders/{reminder_id}/complete",
    response_model=ApiResponse[ReminderResponse],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def set_reminder_completed(
    request: Request,
    reminder_id: str,
    reminder_svc: ReminderSvc,
    body: ReminderCompleteRequest | None = None,
):
    """Mark complete with {"isCompleted": true}; any other body (or none) reopens."""
    is_completed = body.is_completed if body is not None else False
    reminder = await reminder_svc.set_completed(reminder_id, is_completed)
    return ApiResponse(data=ReminderResponse.model_validate(reminder))


@router.delete(
    "/reminders/{reminder_id}",
    response_model=ApiResponse[MessageData],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def delete_reminder(request: Request, reminder_id: str, reminder_svc: ReminderSvc):
    await reminder_svc.delete_reminder(reminder_id)
    return deleted("Reminder")
