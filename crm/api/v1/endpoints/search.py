"""Global search API: ranked results across contacts, notes, interactions, reminders."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from crm.api.v1.dependencies import get_global_search_service
from crm.application.use_cases.search import GlobalSearchService
from crm.core.config import get_settings
from crm.core.limiter import limit_search
from crm.domain.exceptions import InvalidLimitException, MissingQueryException
from crm.schemas.common import ERROR_RESPONSES, ApiResponse
from crm.schemas.search import GlobalSearchResponseSchema

router = APIRouter()

MIN_LIMIT = 1


def parse_limit(raw: str | None, default: int, maximum: int) -> int:
    """Parse the limit query value; absent or empty means default.

    Raises:
        InvalidLimitException: not an integer, or outside 1..maximum.
    """
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise InvalidLimitException(MIN_LIMIT, maximum) from e
    if not MIN_LIMIT <= value <= maximum:
        raise InvalidLimitException(MIN_LIMIT, maximum)
    return value


@router.get(
    "",
    response_model=ApiResponse[GlobalSearchResponseSchema],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
@limit_search
async def global_search(
    request: Request,
    search_svc: Annotated[GlobalSearchService, Depends(get_global_search_service)],
    q: Annotated[
        str | None, Query(description="Search text (at least 2 characters)")
    ] = None,
    limit: Annotated[
        str | None, Query(description="Max results per entity type (1-50, default 10)")
    ] = None,
):
    """Search contacts, notes, interactions and reminders; best matches first."""
    if not q:
        raise MissingQueryException()
    settings = get_settings()
    per_type = parse_limit(limit, settings.search_default_limit, settings.search_max_limit)
    result = await search_svc.global_search(q, per_type)
    return ApiResponse(data=GlobalSearchResponseSchema.model_validate(result))
