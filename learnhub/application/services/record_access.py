"""
Owner-scoped record lookup shared by the record services.

Dependencies: learnhub.boundary.db
System role: Ownership checks for user records
"""

from datetime import datetime, timezone
from typing import Any

from learnhub.boundary.db.document_store import DocumentStore
from learnhub.core.exceptions import RecordNotFoundError


async def get_owned_record(
    store: DocumentStore,
    collection: str,
    record_id: str,
    user_id: str,
) -> dict[str, Any]:
    """
    Fetch a record and verify it belongs to the user.

    Records owned by someone else are reported as missing.

    Raises:
        RecordNotFoundError: If the record does not exist or is not owned by user_id
    """
    record = await store.get(collection, record_id)
    if record is None or record["user_id"] != user_id:
        raise RecordNotFoundError(collection, record_id)
    return record


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
