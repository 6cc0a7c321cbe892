"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: learnhub.configs, learnhub.application, learnhub.boundary, learnhub.core
System role: DI container for service injection
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from learnhub.application.services import (
    ChatService,
    LearningModuleService,
    MediaService,
    NoteService,
    ReminderService,
    VideoService,
)
from learnhub.boundary.aws.s3_client import S3ArtifactStorage
from learnhub.boundary.db.connection import create_session_factory, get_async_engine
from learnhub.boundary.db.document_store import DocumentStore
from learnhub.configs import Settings, get_settings
from learnhub.core.generation import (
    GeminiTextClient,
    ImageGenerationClient,
    VideoGenerationClient,
    create_google_client,
    create_video_tracker,
)
from learnhub.core.jobs.tracker import JobTracker
from learnhub.core.learning import LearningContentGenerator

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-ID"


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._document_store = None
        self._storage = None
        self._storage_resolved = False
        self._video_tracker = None
        self._image_client = None
        self._text_client = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def document_store(self) -> DocumentStore:
        """Get cached document store."""
        if self._document_store is None:
            self._document_store = DocumentStore(create_session_factory(get_async_engine()))
        return self._document_store

    @property
    def storage(self) -> S3ArtifactStorage | None:
        """Get cached artifact storage; None when no bucket is configured."""
        if not self._storage_resolved:
            storage_config = self.settings.storage
            if storage_config.bucket:
                self._storage = S3ArtifactStorage(
                    bucket=storage_config.bucket,
                    region=storage_config.region,
                )
            self._storage_resolved = True
        return self._storage

    @property
    def video_tracker(self) -> JobTracker:
        """Get cached video job tracker."""
        if self._video_tracker is None:
            self._video_tracker = create_video_tracker(self.settings, self.storage)
        return self._video_tracker

    @property
    def image_client(self) -> ImageGenerationClient:
        """Get cached image client."""
        if self._image_client is None:
            mode = self.settings.generation.mode
            google_client = (
                create_google_client(self.settings.gemini.api_key) if mode == "provider" else None
            )
            self._image_client = ImageGenerationClient(
                mode=mode,
                google_client=google_client,
                model_id=self.settings.gemini.image_model,
            )
        return self._image_client

    @property
    def text_client(self) -> GeminiTextClient:
        """Get cached Gemini text client. Raises ConfigurationError without an API key."""
        if self._text_client is None:
            self._text_client = GeminiTextClient.from_settings(self.settings.gemini)
        return self._text_client

    async def aclose(self) -> None:
        """Cancel running jobs and release the database pool."""
        if self._video_tracker is not None:
            await self._video_tracker.aclose()
        if self._document_store is not None:
            await get_async_engine().dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._document_store = None
        self._storage = None
        self._storage_resolved = False
        self._video_tracker = None
        self._image_client = None
        self._text_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_current_user_id(request: Request) -> str:
    """
    Resolve the record owner from the X-User-ID header.

    Raises:
        HTTPException(401): Header missing or blank
    """
    user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_ID_HEADER} header",
        )
    return user_id


def get_document_store() -> DocumentStore:
    return get_service_cache().document_store


def get_note_service(store: DocumentStore = Depends(get_document_store)) -> NoteService:
    """
    Get note service instance.

    Args:
        store: Document store (injected via Depends)

    Returns:
        NoteService: Note service instance
    """
    return NoteService(store=store)


def get_reminder_service(store: DocumentStore = Depends(get_document_store)) -> ReminderService:
    """Get reminder service instance."""
    return ReminderService(store=store)


def get_image_client() -> ImageGenerationClient:
    return get_service_cache().image_client


def get_text_client() -> GeminiTextClient:
    return get_service_cache().text_client


def get_learning_module_service(
    store: DocumentStore = Depends(get_document_store),
    image_client: ImageGenerationClient = Depends(get_image_client),
) -> LearningModuleService:
    """
    Get learning module service for reads and image generation.

    Does not need a Gemini text client, so listing works without an API key.
    """
    return LearningModuleService(store=store, image_client=image_client)


def get_module_authoring_service(
    store: DocumentStore = Depends(get_document_store),
    text_client: GeminiTextClient = Depends(get_text_client),
) -> LearningModuleService:
    """Get learning module service able to generate module content."""
    return LearningModuleService(
        store=store,
        content_generator=LearningContentGenerator(text_client),
    )


def get_chat_service(
    text_client: GeminiTextClient = Depends(get_text_client),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        text_client: Gemini text client (injected via Depends)

    Returns:
        ChatService: Chat service with configured Gemini client
    """
    return ChatService(text_client=text_client)


def get_video_client() -> VideoGenerationClient:
    cache = get_service_cache()
    return VideoGenerationClient(
        cache.video_tracker,
        wait_timeout=cache.settings.generation.wait_timeout_seconds,
    )


def get_media_service(
    image_client: ImageGenerationClient = Depends(get_image_client),
    video_client: VideoGenerationClient = Depends(get_video_client),
) -> MediaService:
    """Get media service instance."""
    return MediaService(image_client=image_client, video_client=video_client)


def get_video_service(
    store: DocumentStore = Depends(get_document_store),
    video_client: VideoGenerationClient = Depends(get_video_client),
) -> VideoService:
    """
    Get module video service instance.

    Uses the artifact bucket when STORAGE_BUCKET is configured.
    """
    cache = get_service_cache()
    return VideoService(
        store=store,
        video_client=video_client,
        storage=cache.storage,
        url_expiry_seconds=cache.settings.storage.url_expiry_seconds,
    )
