"""Interactions API: per-contact timeline and single-interaction CRUD."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from crm.api.v1.dependencies import get_interaction_service
from crm.application.dtos.interaction import InteractionFilters
from crm.application.use_cases.interactions import InteractionService
from crm.core.limiter import limit_writes
from crm.domain.enums import InteractionType
from crm.domain.exceptions import ValidationException
from crm.schemas.common import ERROR_RESPONSES, ApiResponse, MessageData, deleted
from crm.schemas.interaction import (
    InteractionCreateRequest,
    InteractionResponse,
    InteractionUpdateRequest,
)
from crm.shared.utils.datetime import ensure_utc

router = APIRouter()

InteractionSvc = Annotated[InteractionService, Depends(get_interaction_service)]


def _parse_type(raw: str | None) -> InteractionType | None:
    if not raw:
        return None
    try:
        return InteractionType(raw)
    except ValueError as e:
        raise ValidationException(
            "Invalid interaction type", field="type", error_code="INVALID_TYPE"
        ) from e


@router.get(
    "/contacts/{contact_id}/interactions",
    response_model=ApiResponse[list[InteractionResponse]],
    responses=ERROR_RESPONSES,
)
async def list_contact_interactions(
    contact_id: str,
    interaction_svc: InteractionSvc,
    type: Annotated[str | None, Query(description="CALL, MEETING, EMAIL, ...")] = None,
    start_date: Annotated[datetime | None, Query(alias="startDate")] = None,
    end_date: Annotated[datetime | None, Query(alias="endDate")] = None,
):
    """Interactions with a contact, most recent first; optional type and date range."""
    filters = InteractionFilters(
        type=_parse_type(type),
        start_date=ensure_utc(start_date),
        end_date=ensure_utc(end_date),
    )
    items = await interaction_svc.list_for_contact(contact_id, filters)
    return ApiResponse(data=[InteractionResponse.model_validate(i) for i in items])


@router.post(
    "/contacts/{contact_id}/interactions",
    response_model=ApiResponse[InteractionResponse],
    status_code=201,
    responses=ERROR_RESPONSES,
)
@limit_writes
async def create_interaction(
    request: Request,
    contact_id: str,
    body: InteractionCreateRequest,
    interaction_svc: InteractionSvc,
):
    """Log an interaction; date defaults to now."""
    created = await interaction_svc.create_interaction(
        contact_id, body.model_dump(exclude_none=True)
    )
    return ApiResponse(data=InteractionResponse.model_validate(created))


@router.get(
    "/interactions/{interaction_id}",
    response_model=ApiResponse[InteractionResponse],
    responses=ERROR_RESPONSES,
)
async def get_interaction(interaction_id: str, interaction_svc: InteractionSvc):
    interaction = await interaction_svc.get_interaction(interaction_id)
    return ApiResponse(data=InteractionResponse.model_validate(interaction))


@router.put(
    "/interactions/{interaction_id}",
    response_model=ApiResponse[InteractionResponse],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def update_interaction(
    request: Request,
    interaction_id: str,
    body: InteractionUpdateRequest,
    interaction_svc: InteractionSvc,
):
    updated = await interaction_svc.update_interaction(
        interaction_id, body.model_dump(exclude_unset=True)
    )
    return ApiResponse(data=InteractionResponse.model_validate(updated))


@router.delete(
    "/interactions/{interaction_id}",
    response_model=ApiResponse[MessageData],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def delete_interaction(
    request: Request, interaction_id: str, interaction_svc: InteractionSvc
):
    await interaction_svc.delete_interaction(interaction_id)
    return deleted("Interaction")
