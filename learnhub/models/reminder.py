"""
Reminder domain models and schemas.

Dependencies: pydantic
System role: Reminder API contracts
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Priority = Literal["high", "medium", "low"]


class CreateReminderRequest(BaseModel):
    """Request schema for creating a reminder."""

    title: str = Field(..., min_length=1, max_length=255)
    remind_at: datetime = Field(description="When the reminder is due")
    priority: Priority = "medium"


class UpdateReminderRequest(BaseModel):
    """Request schema for updating a reminder. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    remind_at: datetime | None = None
    priority: Priority | None = None
    completed: bool | None = None


class SnoozeReminderRequest(BaseModel):
    """Push a reminder's due time back."""

    minutes: int = Field(default=10, ge=1, le=7 * 24 * 60)


class ReminderResponse(BaseModel):
    """Response schema for a reminder."""

    id: str
    title: str
    remind_at: datetime
    priority: Priority
    completed: bool
    created_at: datetime
    updated_at: datetime
