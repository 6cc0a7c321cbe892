"""
Chat domain models and schemas.

Request/response schemas for the study assistant chat.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Single chat message in history."""

    role: Literal["user", "model", "assistant"] = Field(description="Message author")
    content: str = Field(description="Message content")


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str = Field(..., min_length=1, description="User question or message")
    history: list[ChatMessage] = Field(default_factory=list, description="Prior turns")
    image: str | None = Field(
        default=None,
        description="Optional image as a data URL; switches to a vision request",
    )


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    text: str
