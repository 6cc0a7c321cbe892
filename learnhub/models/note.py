"""
Note domain models and schemas.

Request/response schemas for note operations.

Dependencies: pydantic
System role: Note API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateNoteRequest(BaseModel):
    """Request schema for creating a note."""

    title: str = Field(..., min_length=1, max_length=255, description="Note title")
    content: str = Field(default="", description="Note body")
    color: str | None = Field(default=None, max_length=128, description="Display color token")


class UpdateNoteRequest(BaseModel):
    """Request schema for updating a note. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = None
    color: str | None = Field(None, max_length=128)


class NoteResponse(BaseModel):
    """Response schema for a note."""

    id: str
    title: str
    content: str
    color: str
    created_at: datetime
    updated_at: datetime
