"""Dashboard statistics API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from crm.api.v1.dependencies import get_stats_service
from crm.application.use_cases.stats import DashboardStatsService
from crm.core.config import get_settings
from crm.schemas.common import ERROR_RESPONSES, ApiResponse
from crm.schemas.stats import (
    ContactGrowthResponse,
    DashboardStatsResponse,
    InteractionBreakdownResponse,
    RecentActivityResponse,
)

router = APIRouter()

StatsSvc = Annotated[DashboardStatsService, Depends(get_stats_service)]


@router.get(
    "", response_model=ApiResponse[DashboardStatsResponse], responses=ERROR_RESPONSES
)
async def get_dashboard_stats(stats_svc: StatsSvc):
    """Headline counters for contacts, interactions and reminders."""
    stats = await stats_svc.get_dashboard_stats()
    return ApiResponse(data=DashboardStatsResponse.model_validate(stats))


@router.get(
    "/growth",
    response_model=ApiResponse[list[ContactGrowthResponse]],
    responses=ERROR_RESPONSES,
)
async def get_contact_growth(stats_svc: StatsSvc):
    """New and cumulative contacts for each of the last 12 months."""
    points = await stats_svc.get_contact_growth()
    return ApiResponse(data=[ContactGrowthResponse.model_validate(p) for p in points])


@router.get(
    "/interactions",
    response_model=ApiResponse[list[InteractionBreakdownResponse]],
    responses=ERROR_RESPONSES,
)
async def get_interaction_breakdown(stats_svc: StatsSvc):
    items = await stats_svc.get_interaction_breakdown()
    return ApiResponse(
        data=[InteractionBreakdownResponse.model_validate(i) for i in items]
    )


@router.get(
    "/activity",
    response_model=ApiResponse[list[RecentActivityResponse]],
    responses=ERROR_RESPONSES,
)
async def get_recent_activity(
    stats_svc: StatsSvc,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
):
    """Latest interactions, notes and reminders merged into one feed."""
    limit = limit or get_settings().activity_default_limit
    items = await stats_svc.get_recent_activity(limit)
    return ApiResponse(data=[RecentActivityResponse.model_validate(i) for i in items])
