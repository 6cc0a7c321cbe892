"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    USER_ID_HEADER,
    get_chat_service,
    get_current_user_id,
    get_document_store,
    get_image_client,
    get_learning_module_service,
    get_media_service,
    get_module_authoring_service,
    get_note_service,
    get_reminder_service,
    get_service_cache,
    get_text_client,
    get_video_client,
    get_video_service,
)

__all__ = [
    "USER_ID_HEADER",
    "get_chat_service",
    "get_current_user_id",
    "get_document_store",
    "get_image_client",
    "get_learning_module_service",
    "get_media_service",
    "get_module_authoring_service",
    "get_note_service",
    "get_reminder_service",
    "get_service_cache",
    "get_text_client",
    "get_video_client",
    "get_video_service",
]
