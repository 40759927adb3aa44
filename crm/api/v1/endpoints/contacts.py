"""Contacts API: thin routes delegating to ContactService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from crm.api.v1.dependencies import get_contact_service
from crm.application.use_cases.contacts import ContactService
from crm.core.limiter import limit_writes
from crm.domain.exceptions import MissingQueryException
from crm.schemas.common import ERROR_RESPONSES, ApiResponse, MessageData, deleted
from crm.schemas.contact import (
    ContactCreateRequest,
    ContactResponse,
    ContactUpdateRequest,
    TagAssignRequest,
)

router = APIRouter()

ContactSvc = Annotated[ContactService, Depends(get_contact_service)]


def _split_ids(raw: str | None) -> list[str]:
    """Parse a comma-separated id list, ignoring blanks."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@router.get("", response_model=ApiResponse[list[ContactResponse]])
async def list_contacts(
    contact_svc: ContactSvc,
    tags: Annotated[
        str | None, Query(description="Comma-separated tag ids; contact must have all")
    ] = None,
):
    """List contacts by last name, first name, with their tags."""
    contacts = await contact_svc.list_contacts(_split_ids(tags))
    return ApiResponse(data=[ContactResponse.model_validate(c) for c in contacts])


@router.get(
    "/search", response_model=ApiResponse[list[ContactResponse]], responses=ERROR_RESPONSES
)
async def search_contacts(contact_svc: ContactSvc, q: str | None = None):
    """Contacts whose name, email or company contain q."""
    if not q:
        raise MissingQueryException("Search query is required")
    contacts = await contact_svc.search_contacts(q)
    return ApiResponse(data=[ContactResponse.model_validate(c) for c in contacts])


@router.get("/companies", response_model=ApiResponse[list[str]])
async def list_companies(contact_svc: ContactSvc):
    """Distinct company names, alphabetical (for filter dropdowns)."""
    return ApiResponse(data=await contact_svc.list_companies())


@router.get(
    "/{contact_id}", response_model=ApiResponse[ContactResponse], responses=ERROR_RESPONSES
)
async def get_contact(contact_id: str, contact_svc: ContactSvc):
    contact = await contact_svc.get_contact(contact_id)
    return ApiResponse(data=ContactResponse.model_validate(contact))


@router.post(
    "",
    response_model=ApiResponse[ContactResponse],
    status_code=201,
    responses=ERROR_RESPONSES,
)
@limit_writes
async def create_contact(
    request: Request, body: ContactCreateRequest, contact_svc: ContactSvc
):
    """Create a contact. Empty optional fields are stored as null."""
    created = await contact_svc.create_contact(body.model_dump(exclude_none=True))
    return ApiResponse(data=ContactResponse.model_validate(created))


@router.put(
    "/{contact_id}", response_model=ApiResponse[ContactResponse], responses=ERROR_RESPONSES
)
@limit_writes
async def update_contact(
    request: Request,
    contact_id: str,
    body: ContactUpdateRequest,
    contact_svc: ContactSvc,
):
    """Update the fields present in the body; "" clears an optional field."""
    updated = await contact_svc.update_contact(
        contact_id, body.model_dump(exclude_unset=True)
    )
    return ApiResponse(data=ContactResponse.model_validate(updated))


@router.delete(
    "/{contact_id}", response_model=ApiResponse[MessageData], responses=ERROR_RESPONSES
)
@limit_writes
async def delete_contact(request: Request, contact_id: str, contact_svc: ContactSvc):
    """Delete a contact with its interactions, notes, reminders and tag links."""
    await contact_svc.delete_contact(contact_id)
    return deleted("Contact")


@router.post(
    "/{contact_id}/tags",
    response_model=ApiResponse[ContactResponse],
    status_code=201,
    responses=ERROR_RESPONSES,
)
@limit_writes
async def add_tag_to_contact(
    request: Request,
    contact_id: str,
    body: TagAssignRequest,
    contact_svc: ContactSvc,
):
    """Assign a tag (no-op when already assigned); returns the contact with tags."""
    contact = await contact_svc.add_tag(contact_id, body.tag_id)
    return ApiResponse(data=ContactResponse.model_validate(contact))


@router.delete(
    "/{contact_id}/tags/{tag_id}",
    response_model=ApiResponse[ContactResponse],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def remove_tag_from_contact(
    request: Request, contact_id: str, tag_id: str, contact_svc: ContactSvc
):
    contact = await contact_svc.remove_tag(contact_id, tag_id)
    return ApiResponse(data=ContactResponse.model_validate(contact))
