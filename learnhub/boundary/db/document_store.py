"""
Document store over the relational database.

Collection-oriented access to user-owned records (notes, reminders,
learning modules) with live subscriptions: subscribers receive the full
ordered snapshot of their records on subscribe and after every committed
write.

Dependencies: sqlalchemy, learnhub.boundary.db.CRUD
System role: Persistence boundary for user records
"""

import enum
import inspect
import itertools
import logging
import uuid
from collections import defaultdict
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from learnhub.boundary.db.CRUD import (
    BaseCRUD,
    learning_module_crud,
    note_crud,
    reminder_crud,
)
from learnhub.core.exceptions import StoreError, ValidationError
from learnhub.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

Snapshot = list[dict[str, Any]]
SnapshotCallback = Callable[[Snapshot], Awaitable[None] | None]
Unsubscribe = Callable[[], None]

NOTES = "notes"
REMINDERS = "reminders"
LEARNING_MODULES = "learning_modules"

PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at"})


@dataclass(frozen=True)
class _Collection:
    crud: BaseCRUD
    label: str


_COLLECTIONS: dict[str, _Collection] = {
    NOTES: _Collection(note_crud, "note"),
    REMINDERS: _Collection(reminder_crud, "reminder"),
    LEARNING_MODULES: _Collection(learning_module_crud, "learning module"),
}


def _parse_id(record_id: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(record_id, uuid.UUID):
        return record_id
    try:
        return uuid.UUID(str(record_id))
    except ValueError:
        return None


def _serialize(instance: Any) -> dict[str, Any]:
    data = {
        key: value.value if isinstance(value, enum.Enum) else value
        for key, value in instance.to_dict().items()
    }
    data["id"] = str(data["id"])
    return data


class DocumentStore:
    """User-scoped record store with change subscriptions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Args:
            session_factory: Async session factory for the backing database
        """
        self._session_factory = session_factory
        self._subscribers: dict[tuple[str, str], dict[int, SnapshotCallback]] = defaultdict(dict)
        self._tokens = itertools.count()

    @staticmethod
    def collections() -> list[str]:
        return list(_COLLECTIONS)

    def _collection(self, collection: str) -> _Collection:
        try:
            return _COLLECTIONS[collection]
        except KeyError:
            raise ValidationError(
                f"Unknown collection: {collection}", field="collection"
            ) from None

    def _check_fields(self, entry: _Collection, fields: dict[str, Any]) -> None:
        columns = {attr.key for attr in entry.crud.model.__mapper__.column_attrs}
        unknown = set(fields) - columns
        if unknown:
            raise ValidationError(
                f"Unknown {entry.label} fields: {', '.join(sorted(unknown))}",
                details={"fields": sorted(unknown)},
            )

    async def add(self, collection: str, record: dict[str, Any]) -> str:
        """
        Insert a record.

        Args:
            collection: Collection name
            record: Field values including the owning user_id

        Returns:
            str: New record id

        Raises:
            ValidationError: Unknown collection, unknown fields or missing user_id
            StoreError: If the write fails
        """
        entry = self._collection(collection)
        if not record.get("user_id"):
            raise ValidationError("user_id is required", field="user_id")
        self._check_fields(entry, record)

        async with self._session_factory() as session:
            try:
                instance = await entry.crud.create(session, **record)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                log_exception_with_context(
                    logger, f"{__name__}:add - Failed to add {entry.label}", e, collection=collection
                )
                raise StoreError(f"Failed to add {entry.label}", collection, "add") from e

        record_id = str(instance.id)
        logger.info(f"{__name__}:add - collection={collection} id={record_id}")
        await self._notify(collection, record["user_id"])
        return record_id

    async def update(self, collection: str, record_id: str, partial: dict[str, Any]) -> bool:
        """
        Apply a partial update.

        Args:
            collection: Collection name
            record_id: Record id
            partial: Fields to change (id, user_id and created_at are not writable)

        Returns:
            bool: True if the record existed and was updated

        Raises:
            ValidationError: Unknown collection or fields, or a protected field
            StoreError: If the write fails
        """
        entry = self._collection(collection)
        protected = PROTECTED_FIELDS.intersection(partial)
        if protected:
            raise ValidationError(
                f"Fields cannot be updated: {', '.join(sorted(protected))}",
                details={"fields": sorted(protected)},
            )
        self._check_fields(entry, partial)
        key = _parse_id(record_id)
        if key is None:
            return False

        async with self._session_factory() as session:
            try:
                instance = await entry.crud.update_by_id(session, key, **partial)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                log_exception_with_context(
                    logger,
                    f"{__name__}:update - Failed to update {entry.label}",
                    e,
                    collection=collection,
                    record_id=record_id,
                )
                raise StoreError(f"Failed to update {entry.label}", collection, "update") from e

        if instance is None:
            return False
        logger.debug(f"{__name__}:update - collection={collection} id={record_id}")
        await self._notify(collection, instance.user_id)
        return True

    async def delete(self, collection: str, record_id: str) -> bool:
        """
        Delete a record.

        Returns:
            bool: True if the record existed and was deleted

        Raises:
            StoreError: If the write fails
        """
        entry = self._collection(collection)
        key = _parse_id(record_id)
        if key is None:
            return False

        async with self._session_factory() as session:
            try:
                instance = await entry.crud.get_by_id(session, key)
                if instance is None:
                    return False
                user_id = instance.user_id
                await entry.crud.delete_by_id(session, key)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                log_exception_with_context(
                    logger,
                    f"{__name__}:delete - Failed to delete {entry.label}",
                    e,
                    collection=collection,
                    record_id=record_id,
                )
                raise StoreError(f"Failed to delete {entry.label}", collection, "delete") from e

        logger.info(f"{__name__}:delete - collection={collection} id={record_id}")
        await self._notify(collection, user_id)
        return True

    async def get(self, collection: str, record_id: str) -> dict[str, Any] | None:
        """
        Fetch one record.

        Returns:
            dict | None: Record fields, or None if not found
        """
        entry = self._collection(collection)
        key = _parse_id(record_id)
        if key is None:
            return None

        async with self._session_factory() as session:
            try:
                instance = await entry.crud.get_by_id(session, key)
            except SQLAlchemyError as e:
                log_exception_with_context(
                    logger, f"{__name__}:get - Failed to get {entry.label}", e, collection=collection
                )
                raise StoreError(f"Failed to get {entry.label}", collection, "get") from e
        return _serialize(instance) if instance else None

    async def query(self, collection: str, user_id: str) -> Snapshot:
        """
        List a user's records in collection order.

        Notes: most recently updated first. Reminders: soonest due first.
        Learning modules: newest first.

        Raises:
            StoreError: If the read fails
        """
        entry = self._collection(collection)
        async with self._session_factory() as session:
            try:
                instances = await entry.crud.get_by_owner(session, user_id)
            except SQLAlchemyError as e:
                log_exception_with_context(
                    logger, f"{__name__}:query - Failed to get {entry.label}s", e, collection=collection
                )
                raise StoreError(f"Failed to get {entry.label}s", collection, "query") from e
        return [_serialize(instance) for instance in instances]

    async def subscribe(
        self,
        collection: str,
        user_id: str,
        callback: SnapshotCallback,
    ) -> Unsubscribe:
        """
        Subscribe to a user's records in a collection.

        The callback receives the current snapshot immediately, then a fresh
        snapshot after every committed write to those records.

        Args:
            collection: Collection name
            user_id: Owner whose records are watched
            callback: Sync or async callable taking the snapshot list

        Returns:
            Unsubscribe: Idempotent function that stops delivery
        """
        self._collection(collection)
        key = (collection, user_id)
        token = next(self._tokens)
        self._subscribers[key][token] = callback
        logger.debug(f"{__name__}:subscribe - collection={collection} user_id={user_id}")

        def unsubscribe() -> None:
            listeners = self._subscribers.get(key)
            if listeners is None:
                return
            listeners.pop(token, None)
            if not listeners:
                self._subscribers.pop(key, None)

        try:
            await self._deliver(callback, await self.query(collection, user_id))
        except Exception:
            unsubscribe()
            raise
        return unsubscribe

    async def _notify(self, collection: str, user_id: str) -> None:
        listeners = list(self._subscribers.get((collection, user_id), {}).values())
        if not listeners:
            return
        try:
            snapshot = await self.query(collection, user_id)
        except StoreError:
            logger.warning(
                f"{__name__}:_notify - Snapshot read failed after committed write, "
                f"subscribers not notified collection={collection} user_id={user_id}"
            )
            return
        for callback in listeners:
            try:
                await self._deliver(callback, snapshot)
            except Exception as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:_notify - Subscriber callback failed",
                    e,
                    collection=collection,
                    user_id=user_id,
                )

    @staticmethod
    async def _deliver(callback: SnapshotCallback, snapshot: Snapshot) -> None:
        result = callback(list(snapshot))
        if inspect.isawaitable(result):
            await result
