"""
Learning module video service.

Generates a narrated video for a learning module, stores it and records
the resulting URL on the module.

Dependencies: botocore, learnhub.core.generation, learnhub.boundary.aws, learnhub.boundary.db
System role: Module video use case orchestration
"""

import logging
import time

from botocore.exceptions import ClientError

from learnhub.boundary.aws.s3_client import S3ArtifactStorage
from learnhub.boundary.db.document_store import LEARNING_MODULES, DocumentStore
from learnhub.core.exceptions import (
    GenerationError,
    RecordNotFoundError,
    StoreError,
    ValidationError,
)
from learnhub.core.generation.video_client import VideoGenerationClient
from learnhub.core.jobs.artifacts import decode_data_url, extension_for
from learnhub.core.jobs.models import GeneratedArtifact

logger = logging.getLogger(__name__)

VIDEO_KEY_PREFIX = "learning-videos"


class VideoService:
    """Module video generation orchestrator."""

    def __init__(
        self,
        store: DocumentStore,
        video_client: VideoGenerationClient,
        storage: S3ArtifactStorage | None = None,
        url_expiry_seconds: int = 3600,
    ) -> None:
        """
        Args:
            store: Document store holding learning modules
            video_client: Video generation client
            storage: Artifact bucket; when None artifact URLs are stored as-is
            url_expiry_seconds: Lifetime of presigned URLs written to modules
        """
        self.store = store
        self.video_client = video_client
        self.storage = storage
        self.url_expiry_seconds = url_expiry_seconds

    async def generate_for_module(self, module_id: str, script: str) -> str:
        """
        Generate a module video and record its URL on the module.

        With storage configured the video ends up at
        learning-videos/<module_id>-<epoch ms><ext>: bucket artifacts are
        copied there, inline (data URL) artifacts are uploaded there.

        Returns:
            str: URL written to generated_video_url

        Raises:
            ValidationError: If module_id or script is blank
            RecordNotFoundError: If the module does not exist
            GenerationError: If video generation fails or returns an unreadable artifact
            StoreError: If the video cannot be written to the artifact bucket
        """
        if not module_id or not script or not script.strip():
            raise ValidationError("Missing moduleId or script")
        if await self.store.get(LEARNING_MODULES, module_id) is None:
            raise RecordNotFoundError(LEARNING_MODULES, module_id)

        logger.info(f"{__name__}:generate_for_module - START module_id={module_id}")
        artifact = await self.video_client.generate(script)
        video_url = await self._store_artifact(module_id, artifact)

        await self.store.update(LEARNING_MODULES, module_id, {"generated_video_url": video_url})
        logger.info(f"{__name__}:generate_for_module - END module_id={module_id}")
        return video_url

    async def _store_artifact(self, module_id: str, artifact: GeneratedArtifact) -> str:
        if self.storage is None:
            return artifact.url
        if artifact.storage_key is None and not artifact.url.startswith("data:"):
            return artifact.url

        s3_key = (
            f"{VIDEO_KEY_PREFIX}/{module_id}-{int(time.time() * 1000)}"
            f"{extension_for(artifact.mime_type)}"
        )
        try:
            if artifact.storage_key is not None:
                await self.storage.copy_object(artifact.storage_key, s3_key)
            else:
                try:
                    data, mime_type = decode_data_url(artifact.url)
                except ValueError as e:
                    raise GenerationError("Generated video could not be read") from e
                await self.storage.upload_bytes(s3_key, data, mime_type)
            url, _ = self.storage.generate_presigned_download_url(
                s3_key, expires_in=self.url_expiry_seconds
            )
        except ClientError as e:
            logger.error(
                f"{__name__}:_store_artifact - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise StoreError("Failed to store module video", LEARNING_MODULES, "upload") from e
        return url
