"""
Test suite for ReminderService.

System role: Verification of reminder scheduling, completion and snoozing
"""

from datetime import datetime, timedelta, timezone

import pytest

from learnhub.application.services.record_access import as_utc
from learnhub.application.services.reminder_service import ReminderService
from learnhub.core.exceptions import RecordNotFoundError, ValidationError


@pytest.fixture
def reminder_service(document_store) -> ReminderService:
    return ReminderService(store=document_store)


@pytest.fixture
def tomorrow() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=1)


@pytest.mark.asyncio
async def test_add_reminder_should_start_incomplete(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    reminder_id = await reminder_service.add_reminder("u1", "Math test", tomorrow, "high")

    (reminder,) = await reminder_service.list_reminders("u1")
    assert reminder["id"] == reminder_id
    assert reminder["priority"] == "high"
    assert reminder["completed"] is False
    assert as_utc(reminder["remind_at"]) == tomorrow


@pytest.mark.asyncio
async def test_add_reminder_should_reject_unknown_priority(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    with pytest.raises(ValueError):
        await reminder_service.add_reminder("u1", "Math test", tomorrow, "urgent")


@pytest.mark.asyncio
async def test_toggle_complete_should_flip_flag(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    reminder_id = await reminder_service.add_reminder("u1", "Read chapter", tomorrow)

    assert (await reminder_service.toggle_complete("u1", reminder_id))["completed"] is True
    assert (await reminder_service.toggle_complete("u1", reminder_id))["completed"] is False


@pytest.mark.asyncio
async def test_snooze_should_push_future_reminder_from_due_time(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    reminder_id = await reminder_service.add_reminder("u1", "Lab report", tomorrow)

    reminder = await reminder_service.snooze("u1", reminder_id, 15)

    assert as_utc(reminder["remind_at"]) == tomorrow + timedelta(minutes=15)


@pytest.mark.asyncio
async def test_snooze_should_count_overdue_reminder_from_now(
    reminder_service: ReminderService,
) -> None:
    overdue = datetime.now(timezone.utc) - timedelta(hours=2)
    reminder_id = await reminder_service.add_reminder("u1", "Overdue", overdue)
    await reminder_service.toggle_complete("u1", reminder_id)
    before = datetime.now(timezone.utc)

    reminder = await reminder_service.snooze("u1", reminder_id, 10)

    remind_at = as_utc(reminder["remind_at"])
    assert remind_at >= before + timedelta(minutes=10)
    assert remind_at <= datetime.now(timezone.utc) + timedelta(minutes=10)
    assert reminder["completed"] is False


@pytest.mark.asyncio
async def test_snooze_should_reject_non_positive_minutes(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    reminder_id = await reminder_service.add_reminder("u1", "Lab report", tomorrow)

    with pytest.raises(ValidationError):
        await reminder_service.snooze("u1", reminder_id, 0)


@pytest.mark.asyncio
async def test_update_reminder_should_change_priority_and_time(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    reminder_id = await reminder_service.add_reminder("u1", "Quiz", tomorrow)
    later = tomorrow + timedelta(days=2)

    reminder = await reminder_service.update_reminder(
        "u1", reminder_id, {"priority": "low", "remind_at": later}
    )

    assert reminder["priority"] == "low"
    assert as_utc(reminder["remind_at"]) == later


@pytest.mark.asyncio
async def test_delete_reminder_of_other_user_should_raise(
    reminder_service: ReminderService, tomorrow: datetime
) -> None:
    reminder_id = await reminder_service.add_reminder("owner", "Secret", tomorrow)

    with pytest.raises(RecordNotFoundError):
        await reminder_service.delete_reminder("intruder", reminder_id)
