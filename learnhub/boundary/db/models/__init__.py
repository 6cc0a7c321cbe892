"""
Database models package.

Exports:
  - NoteModel: Note ORM model
  - ReminderModel, ReminderPriority: Reminder ORM model and priority enum
  - LearningModuleModel: Learning module ORM model

Dependencies: sqlalchemy, learnhub.boundary.db.base
System role: Database model definitions for domain entities
"""

from learnhub.boundary.db.models.learning_module_model import LearningModuleModel
from learnhub.boundary.db.models.note_model import NoteModel
from learnhub.boundary.db.models.reminder_model import ReminderModel, ReminderPriority

__all__ = [
    "LearningModuleModel",
    "NoteModel",
    "ReminderModel",
    "ReminderPriority",
]
