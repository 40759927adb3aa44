"""Tags API: tag CRUD and contacts carrying a tag."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from crm.api.v1.dependencies import get_contact_service, get_tag_service
from crm.application.use_cases.contacts import ContactService
from crm.application.use_cases.tags import TagService
from crm.core.limiter import limit_writes
from crm.schemas.common import ERROR_RESPONSES, ApiResponse, MessageData, deleted
from crm.schemas.contact import ContactResponse
from crm.schemas.tag import TagCreateRequest, TagResponse, TagUpdateRequest

router = APIRouter()

TagSvc = Annotated[TagService, Depends(get_tag_service)]


@router.get("", response_model=ApiResponse[list[TagResponse]])
async def list_tags(tag_svc: TagSvc):
    """All tags by name, each with the number of contacts carrying it."""
    tags = await tag_svc.list_tags()
    return ApiResponse(data=[TagResponse.model_validate(t) for t in tags])


@router.get("/{tag_id}", response_model=ApiResponse[TagResponse], responses=ERROR_RESPONSES)
async def get_tag(tag_id: str, tag_svc: TagSvc):
    tag = await tag_svc.get_tag(tag_id)
    return ApiResponse(data=TagResponse.model_validate(tag))


@router.post(
    "",
    response_model=ApiResponse[TagResponse],
    status_code=201,
    responses=ERROR_RESPONSES,
)
@limit_writes
async def create_tag(request: Request, body: TagCreateRequest, tag_svc: TagSvc):
    """Create a tag; the name is trimmed and color falls back to the default."""
    created = await tag_svc.create_tag(body.model_dump(exclude_none=True))
    return ApiResponse(data=TagResponse.model_validate(created))


@router.put("/{tag_id}", response_model=ApiResponse[TagResponse], responses=ERROR_RESPONSES)
@limit_writes
async def update_tag(
    request: Request, tag_id: str, body: TagUpdateRequest, tag_svc: TagSvc
):
    updated = await tag_svc.update_tag(tag_id, body.model_dump(exclude_none=True))
    return ApiResponse(data=TagResponse.model_validate(updated))


@router.delete(
    "/{tag_id}", response_model=ApiResponse[MessageData], responses=ERROR_RESPONSES
)
@limit_writes
async def delete_tag(request: Request, tag_id: str, tag_svc: TagSvc):
    """Delete a tag; it is removed from every contact."""
    await tag_svc.delete_tag(tag_id)
    return deleted("Tag")


@router.get(
    "/{tag_id}/contacts",
    response_model=ApiResponse[list[ContactResponse]],
    responses=ERROR_RESPONSES,
)
async def list_tag_contacts(
    tag_id: str,
    contact_svc: Annotated[ContactService, Depends(get_contact_service)],
):
    contacts = await contact_svc.list_contacts_for_tag(tag_id)
    return ApiResponse(data=[ContactResponse.model_validate(c) for c in contacts])
