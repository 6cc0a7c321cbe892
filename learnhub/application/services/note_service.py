"""
Note service orchestrator.

Coordinates note lifecycle operations.

Dependencies: learnhub.boundary.db
System role: Note use case orchestration
"""

import logging
from typing import Any

from learnhub.application.services.record_access import get_owned_record
from learnhub.boundary.db.document_store import NOTES, DocumentStore
from learnhub.boundary.db.models.note_model import DEFAULT_NOTE_COLOR
from learnhub.core.exceptions import RecordNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _require_title(title: str | None) -> None:
    if title is not None and not title.strip():
        raise ValidationError("Note title must not be blank", field="title")


class NoteService:
    """Note service orchestrator."""

    def __init__(self, store: DocumentStore) -> None:
        """
        Initialize note service.

        Args:
            store: Document store holding user records
        """
        self.store = store

    async def add_note(
        self,
        user_id: str,
        title: str,
        content: str = "",
        color: str | None = None,
    ) -> str:
        """
        Create a note.

        Returns:
            str: Created note ID

        Raises:
            ValidationError: If title is blank
            StoreError: If the write fails
        """
        _require_title(title)
        note_id = await self.store.add(
            NOTES,
            {
                "user_id": user_id,
                "title": title.strip(),
                "content": content,
                "color": color or DEFAULT_NOTE_COLOR,
            },
        )
        logger.info("Note created", extra={"note_id": note_id, "user_id": user_id})
        return note_id

    async def list_notes(self, user_id: str) -> list[dict[str, Any]]:
        """List a user's notes, most recently updated first."""
        return await self.store.query(NOTES, user_id)

    async def update_note(
        self,
        user_id: str,
        note_id: str,
        updates: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Update a note. updated_at is refreshed by the store.

        Args:
            user_id: Owner identifier
            note_id: Note ID
            updates: Subset of title, content, color

        Returns:
            dict: Updated note

        Raises:
            RecordNotFoundError: If the note does not exist for this user
            ValidationError: If the new title is blank
        """
        _require_title(updates.get("title"))
        await get_owned_record(self.store, NOTES, note_id, user_id)
        if updates:
            await self.store.update(NOTES, note_id, updates)
        record = await self.store.get(NOTES, note_id)
        if record is None:
            raise RecordNotFoundError(NOTES, note_id)
        return record

    async def delete_note(self, user_id: str, note_id: str) -> None:
        """
        Delete a note.

        Raises:
            RecordNotFoundError: If the note does not exist for this user
        """
        await get_owned_record(self.store, NOTES, note_id, user_id)
        await self.store.delete(NOTES, note_id)
        logger.info("Note deleted", extra={"note_id": note_id, "user_id": user_id})
