"""
Reminder service orchestrator.

Coordinates reminder lifecycle operations: scheduling, completion and snoozing.

Dependencies: learnhub.boundary.db
System role: Reminder use case orchestration
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from learnhub.application.services.record_access import as_utc, get_owned_record
from learnhub.boundary.db.document_store import REMINDERS, DocumentStore
from learnhub.boundary.db.models.reminder_model import ReminderPriority
from learnhub.core.exceptions import RecordNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ReminderService:
    """Reminder service orchestrator."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def add_reminder(
        self,
        user_id: str,
        title: str,
        remind_at: datetime,
        priority: str = ReminderPriority.MEDIUM.value,
    ) -> str:
        """
        Schedule a reminder. New reminders start incomplete.

        Returns:
            str: Created reminder ID

        Raises:
            ValidationError: If title is blank
        """
        if not title or not title.strip():
            raise ValidationError("Reminder title must not be blank", field="title")
        reminder_id = await self.store.add(
            REMINDERS,
            {
                "user_id": user_id,
                "title": title.strip(),
                "remind_at": as_utc(remind_at),
                "priority": ReminderPriority(priority),
                "completed": False,
            },
        )
        logger.info("Reminder created", extra={"reminder_id": reminder_id, "user_id": user_id})
        return reminder_id

    async def list_reminders(self, user_id: str) -> list[dict[str, Any]]:
        """List a user's reminders, soonest due first."""
        return await self.store.query(REMINDERS, user_id)

    async def update_reminder(
        self,
        user_id: str,
        reminder_id: str,
        updates: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Update a reminder.

        Raises:
            RecordNotFoundError: If the reminder does not exist for this user
            ValidationError: If the new title is blank
        """
        title = updates.get("title")
        if title is not None and not title.strip():
            raise ValidationError("Reminder title must not be blank", field="title")
        await get_owned_record(self.store, REMINDERS, reminder_id, user_id)

        fields = dict(updates)
        if "priority" in fields:
            fields["priority"] = ReminderPriority(fields["priority"])
        if "remind_at" in fields:
            fields["remind_at"] = as_utc(fields["remind_at"])
        return await self._apply(reminder_id, fields)

    async def toggle_complete(self, user_id: str, reminder_id: str) -> dict[str, Any]:
        """Flip a reminder's completed flag."""
        reminder = await get_owned_record(self.store, REMINDERS, reminder_id, user_id)
        return await self._apply(reminder_id, {"completed": not reminder["completed"]})

    async def snooze(self, user_id: str, reminder_id: str, minutes: int) -> dict[str, Any]:
        """
        Push a reminder back by `minutes`, counted from its due time or from
        now if it is already overdue.

        Raises:
            ValidationError: If minutes is not positive
        """
        if minutes <= 0:
            raise ValidationError("Snooze minutes must be positive", field="minutes")
        reminder = await get_owned_record(self.store, REMINDERS, reminder_id, user_id)
        base = max(as_utc(reminder["remind_at"]), datetime.now(timezone.utc))
        return await self._apply(
            reminder_id,
            {"remind_at": base + timedelta(minutes=minutes), "completed": False},
        )

    async def delete_reminder(self, user_id: str, reminder_id: str) -> None:
        """Delete a reminder."""
        await get_owned_record(self.store, REMINDERS, reminder_id, user_id)
        await self.store.delete(REMINDERS, reminder_id)
        logger.info("Reminder deleted", extra={"reminder_id": reminder_id, "user_id": user_id})

    async def _apply(self, reminder_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        if fields:
            await self.store.update(REMINDERS, reminder_id, fields)
        record = await self.store.get(REMINDERS, reminder_id)
        if record is None:
            raise RecordNotFoundError(REMINDERS, reminder_id)
        return record
