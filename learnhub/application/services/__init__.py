"""Service orchestrators."""

from .chat_service import ChatService
from .learning_module_service import LearningModuleService
from .media_service import MediaService
from .note_service import NoteService
from .reminder_service import ReminderService
from .video_service import VideoService

__all__ = [
    "ChatService",
    "LearningModuleService",
    "MediaService",
    "NoteService",
    "ReminderService",
    "VideoService",
]
