"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from learnhub.boundary.db.CRUD import note_crud

    notes = await note_crud.get_by_owner(db, user_id)
"""

from learnhub.boundary.db.CRUD.base_crud import BaseCRUD
from learnhub.boundary.db.CRUD.learning_module_crud import (
    LearningModuleCRUD,
    learning_module_crud,
)
from learnhub.boundary.db.CRUD.note_crud import NoteCRUD, note_crud
from learnhub.boundary.db.CRUD.reminder_crud import ReminderCRUD, reminder_crud

__all__ = [
    "BaseCRUD",
    "LearningModuleCRUD",
    "learning_module_crud",
    "NoteCRUD",
    "note_crud",
    "ReminderCRUD",
    "reminder_crud",
]
