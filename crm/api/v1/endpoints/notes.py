"""Notes API: per-contact notes, CRUD and pin toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from crm.api.v1.dependencies import get_note_service
from crm.application.use_cases.notes import NoteService
from crm.core.limiter import limit_writes
from crm.schemas.common import ERROR_RESPONSES, ApiResponse, MessageData, deleted
from crm.schemas.note import NoteCreateRequest, NoteResponse, NoteUpdateRequest

router = APIRouter()

NoteSvc = Annotated[NoteService, Depends(get_note_service)]


@router.get(
    "/contacts/{contact_id}/notes",
    response_model=ApiResponse[list[NoteResponse]],
    responses=ERROR_RESPONSES,
)
async def list_contact_notes(contact_id: str, note_svc: NoteSvc):
    """Notes for a contact: pinned first, then newest first."""
    notes = await note_svc.list_for_contact(contact_id)
    return ApiResponse(data=[NoteResponse.model_validate(n) for n in notes])


@router.post(
    "/contacts/{contact_id}/notes",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    responses=ERROR_RESPONSES,
)
@limit_writes
async def create_note(
    request: Request, contact_id: str, body: NoteCreateRequest, note_svc: NoteSvc
):
    created = await note_svc.create_note(contact_id, body.model_dump())
    return ApiResponse(data=NoteResponse.model_validate(created))


@router.get(
    "/notes/{note_id}", response_model=ApiResponse[NoteResponse], responses=ERROR_RESPONSES
)
async def get_note(note_id: str, note_svc: NoteSvc):
    note = await note_svc.get_note(note_id)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.put(
    "/notes/{note_id}", response_model=ApiResponse[NoteResponse], responses=ERROR_RESPONSES
)
@limit_writes
async def update_note(
    request: Request, note_id: str, body: NoteUpdateRequest, note_svc: NoteSvc
):
    updated = await note_svc.update_note(note_id, body.model_dump(exclude_none=True))
    return ApiResponse(data=NoteResponse.model_validate(updated))


@router.patch(
    "/notes/{note_id}/pin",
    response_model=ApiResponse[NoteResponse],
    responses=ERROR_RESPONSES,
)
@limit_writes
async def toggle_note_pin(request: Request, note_id: str, note_svc: NoteSvc):
    """Flip the note's pinned flag."""
    note = await note_svc.toggle_pin(note_id)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.delete(
    "/notes/{note_id}", response_model=ApiResponse[MessageData], responses=ERROR_RESPONSES
)
@limit_writes
async def delete_note(request: Request, note_id: str, note_svc: NoteSvc):
    await note_svc.delete_note(note_id)
    return deleted("Note")
