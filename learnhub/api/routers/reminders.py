"""
Reminder API endpoints.

Routes:
- GET /reminders - List the caller's reminders (soonest first)
- POST /reminders - Create reminder
- PATCH /reminders/{id} - Update reminder
- DELETE /reminders/{id} - Delete reminder
- POST /reminders/{id}/toggle - Flip completed flag
- POST /reminders/{id}/snooze - Push due time back

Dependencies: learnhub.application.services, learnhub.models
System role: Reminder management HTTP API
"""

from fastapi import APIRouter, Depends, Response, status

from learnhub.api.deps import get_current_user_id, get_reminder_service
from learnhub.api.routers.router_utils import handle_service_errors
from learnhub.application.services import ReminderService
from learnhub.models.common import CreatedResponse
from learnhub.models.reminder import (
    CreateReminderRequest,
    ReminderResponse,
    SnoozeReminderRequest,
    UpdateReminderRequest,
)

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get("", response_model=list[ReminderResponse])
@handle_service_errors
async def list_reminders(
    user_id: str = Depends(get_current_user_id),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> list[ReminderResponse]:
    reminders = await reminder_service.list_reminders(user_id)
    return [ReminderResponse.model_validate(reminder) for reminder in reminders]


@router.post("", response_model=CreatedResponse, status_code=201)
@handle_service_errors
async def create_reminder(
    request: CreateReminderRequest,
    user_id: str = Depends(get_current_user_id),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> CreatedResponse:
    reminder_id = await reminder_service.add_reminder(
        user_id,
        title=request.title,
        remind_at=request.remind_at,
        priority=request.priority,
    )
    return CreatedResponse(id=reminder_id)


@router.patch("/{reminder_id}", response_model=ReminderResponse)
@handle_service_errors
async def update_reminder(
    reminder_id: str,
    request: UpdateReminderRequest,
    user_id: str = Depends(get_current_user_id),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    reminder = await reminder_service.update_reminder(
        user_id, reminder_id, request.model_dump(exclude_unset=True, exclude_none=True)
    )
    return ReminderResponse.model_validate(reminder)


@router.post("/{reminder_id}/toggle", response_model=ReminderResponse)
@handle_service_errors
async def toggle_reminder(
    reminder_id: str,
    user_id: str = Depends(get_current_user_id),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    reminder = await reminder_service.toggle_complete(user_id, reminder_id)
    return ReminderResponse.model_validate(reminder)


@router.post("/{reminder_id}/snooze", response_model=ReminderResponse)
@handle_service_errors
async def snooze_reminder(
    reminder_id: str,
    request: SnoozeReminderRequest,
    user_id: str = Depends(get_current_user_id),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    reminder = await reminder_service.snooze(user_id, reminder_id, request.minutes)
    return ReminderResponse.model_validate(reminder)


@router.delete("/{reminder_id}", status_code=204)
@handle_service_errors
async def delete_reminder(
    reminder_id: str,
    user_id: str = Depends(get_current_user_id),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> Response:
    await reminder_service.delete_reminder(user_id, reminder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
