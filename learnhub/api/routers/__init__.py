"""API routers."""

from .chat import router as chat_router
from .health import router as health_router
from .jobs import router as jobs_router
from .learning_modules import router as learning_modules_router
from .media import router as media_router
from .notes import router as notes_router
from .realtime import router as realtime_router
from .reminders import router as reminders_router
from .video import router as video_router

__all__ = [
    "chat_router",
    "health_router",
    "jobs_router",
    "learning_modules_router",
    "media_router",
    "notes_router",
    "realtime_router",
    "reminders_router",
    "video_router",
]
