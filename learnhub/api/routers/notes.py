"""
Note API endpoints.

Routes:
- GET /notes - List the caller's notes (most recently updated first)
- POST /notes - Create note
- PATCH /notes/{id} - Update note
- DELETE /notes/{id} - Delete note

Dependencies: learnhub.application.services, learnhub.models
System role: Note management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from learnhub.api.deps import get_current_user_id, get_note_service
from learnhub.api.routers.router_utils import handle_service_errors
from learnhub.application.services import NoteService
from learnhub.models.common import CreatedResponse
from learnhub.models.note import CreateNoteRequest, NoteResponse, UpdateNoteRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteResponse])
@handle_service_errors
async def list_notes(
    user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
) -> list[NoteResponse]:
    """List the caller's notes."""
    notes = await note_service.list_notes(user_id)
    return [NoteResponse.model_validate(note) for note in notes]


@router.post("", response_model=CreatedResponse, status_code=201)
@handle_service_errors
async def create_note(
    request: CreateNoteRequest,
    user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
) -> CreatedResponse:
    """
    Create a note.

    Raises:
        HTTPException(400): Blank title
        HTTPException(500): Store failure
    """
    note_id = await note_service.add_note(
        user_id,
        title=request.title,
        content=request.content,
        color=request.color,
    )
    return CreatedResponse(id=note_id)


@router.patch("/{note_id}", response_model=NoteResponse)
@handle_service_errors
async def update_note(
    note_id: str,
    request: UpdateNoteRequest,
    user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Update a note.

    Raises:
        HTTPException(404): Note not found
    """
    note = await note_service.update_note(
        user_id, note_id, request.model_dump(exclude_unset=True, exclude_none=True)
    )
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", status_code=204)
@handle_service_errors
async def delete_note(
    note_id: str,
    user_id: str = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
) -> Response:
    """Delete a note."""
    await note_service.delete_note(user_id, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
