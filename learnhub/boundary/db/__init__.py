"""
Database boundary layer: ORM models, CRUD operations, connection management
and the collection-oriented document store.

Exports:
  - Base, UUIDMixin, OwnerMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - NoteModel, ReminderModel, LearningModuleModel: User record entities
  - note_crud, reminder_crud, learning_module_crud: CRUD operation singletons
  - DocumentStore: Collection access with live subscriptions

Dependencies: sqlalchemy, learnhub.configs
System role: Database adapter providing persistent storage for user records.
"""

from learnhub.boundary.db.base import Base, OwnerMixin, TimestampMixin, UUIDMixin
from learnhub.boundary.db.connection import (
    create_session_factory,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from learnhub.boundary.db.models import (
    LearningModuleModel,
    NoteModel,
    ReminderModel,
    ReminderPriority,
)
from learnhub.boundary.db.CRUD import (
    BaseCRUD,
    LearningModuleCRUD,
    NoteCRUD,
    ReminderCRUD,
    learning_module_crud,
    note_crud,
    reminder_crud,
)
from learnhub.boundary.db.document_store import (
    LEARNING_MODULES,
    NOTES,
    REMINDERS,
    DocumentStore,
)

__all__ = [
    # Base classes
    "Base",
    "OwnerMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "create_session_factory",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "LearningModuleModel",
    "NoteModel",
    "ReminderModel",
    "ReminderPriority",
    # CRUD
    "BaseCRUD",
    "LearningModuleCRUD",
    "NoteCRUD",
    "ReminderCRUD",
    "learning_module_crud",
    "note_crud",
    "reminder_crud",
    # Store
    "DocumentStore",
    "LEARNING_MODULES",
    "NOTES",
    "REMINDERS",
]
