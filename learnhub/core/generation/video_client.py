"""Asynchronous video generation.

Video synthesis runs as tracked jobs. The progress source decides where a
job's progress comes from: fixed timer checkpoints in simulated mode, or
polling a Veo long-running operation in provider mode.

Dependencies: google.genai, learnhub.core.jobs, learnhub.boundary.aws
System role: Video half of the generation client
"""

import asyncio
import logging
import uuid
from collections.abc import Sequence
from typing import TYPE_CHECKING

from google.genai import types

from learnhub.core.exceptions import GenerationError, ProviderError
from learnhub.core.generation.placeholders import render_video_placeholder
from learnhub.core.generation.provider import create_google_client, describe_provider_error
from learnhub.core.jobs.artifacts import to_data_url
from learnhub.core.jobs.models import GeneratedArtifact, GenerationConfig, JobStatus
from learnhub.core.jobs.progress import (
    DEFAULT_CHECKPOINTS,
    ProgressReporter,
    ProgressSource,
    SimulatedProgressSource,
    Sleeper,
)
from learnhub.core.jobs.tracker import JobTracker

if TYPE_CHECKING:
    from google import genai

    from learnhub.boundary.aws.s3_client import S3ArtifactStorage
    from learnhub.configs.settings import Settings

logger = logging.getLogger(__name__)

VIDEO_MIME_TYPE = "video/mp4"
VIDEO_KEY_PREFIX = "generated-videos"


class VeoProgressSource(ProgressSource):
    """Drives a job by polling a Veo generate_videos operation.

    Each poll that finds the operation still running reports the next
    checkpoint, so progress keeps moving without exceeding the last one.
    """

    def __init__(
        self,
        google_client: "genai.Client",
        model_id: str = "veo-2.0-generate-001",
        storage: "S3ArtifactStorage | None" = None,
        poll_interval: float = 10.0,
        checkpoints: Sequence[int] = DEFAULT_CHECKPOINTS,
        url_expiry_seconds: int = 3600,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._client = google_client
        self._model_id = model_id
        self._storage = storage
        self._poll_interval = poll_interval
        self._checkpoints = tuple(checkpoints)
        self._url_expiry_seconds = url_expiry_seconds
        self._sleep = sleep

    async def advance(
        self,
        prompt: str,
        config: GenerationConfig,
        report: ProgressReporter,
    ) -> GeneratedArtifact:
        logger.info(f"{__name__}:advance - START model={self._model_id} prompt_len={len(prompt)}")
        try:
            operation = await asyncio.to_thread(
                self._client.models.generate_videos,
                model=self._model_id,
                prompt=prompt,
                config=types.GenerateVideosConfig(
                    number_of_videos=1,
                    aspect_ratio=config.aspect_ratio,
                ),
            )
            polls = 0
            while not operation.done:
                await self._sleep(self._poll_interval)
                operation = await asyncio.to_thread(self._client.operations.get, operation)
                if polls < len(self._checkpoints):
                    report(self._checkpoints[polls])
                polls += 1
        except Exception as e:
            raise describe_provider_error(e, provider="veo") from e

        if operation.error:
            raise ProviderError(
                f"Video generation failed: {operation.error.get('message', operation.error)}",
                provider="veo",
            )
        videos = operation.response.generated_videos if operation.response else None
        if not videos or videos[0].video is None:
            raise ProviderError(
                "No video was returned. The prompt may have been filtered.",
                kind=ProviderError.CONTENT_POLICY,
                provider="veo",
            )

        video = videos[0].video
        if not video.video_bytes:
            await asyncio.to_thread(self._client.files.download, file=video)
        data = video.video_bytes
        mime_type = video.mime_type or VIDEO_MIME_TYPE

        url, s3_key = await self._publish(data, mime_type)
        logger.info(f"{__name__}:advance - END bytes={len(data)} s3_key={s3_key}")
        return GeneratedArtifact(
            url=url, prompt=prompt, mime_type=mime_type, config=config, storage_key=s3_key
        )

    async def _publish(self, data: bytes, mime_type: str) -> tuple[str, str | None]:
        """Store the video bytes. Returns (url, bucket key or None when inlined)."""
        if self._storage is None:
            return to_data_url(data, mime_type), None
        s3_key = f"{VIDEO_KEY_PREFIX}/{uuid.uuid4().hex}.mp4"
        await self._storage.upload_bytes(s3_key, data, mime_type)
        url, _ = self._storage.generate_presigned_download_url(
            s3_key, expires_in=self._url_expiry_seconds
        )
        return url, s3_key


class VideoGenerationClient:
    """Front door for video generation on top of a job tracker."""

    def __init__(self, tracker: JobTracker, wait_timeout: float = 600.0) -> None:
        self._tracker = tracker
        self._wait_timeout = wait_timeout

    @property
    def tracker(self) -> JobTracker:
        return self._tracker

    def start(self, prompt: str, config: GenerationConfig | None = None) -> str:
        """Start a video job and return its id without waiting."""
        return self._tracker.submit(prompt, config)

    async def generate(
        self,
        script: str,
        config: GenerationConfig | None = None,
    ) -> GeneratedArtifact:
        """
        Generate a video and wait for the result.

        Args:
            script: Narration script used as the video prompt
            config: Provider pass-through options

        Returns:
            GeneratedArtifact: The completed video artifact

        Raises:
            ValidationError: If script is empty
            GenerationError: If the job fails or exceeds the wait timeout
        """
        job_id = self.start(script, config)
        try:
            job = await self._tracker.wait(job_id, timeout=self._wait_timeout)
        except asyncio.TimeoutError as e:
            raise GenerationError("Video generation timed out", job_id=job_id) from e

        if job is None or job.status is not JobStatus.COMPLETED or job.result is None:
            message = job.error if job and job.error else "Video generation failed"
            raise GenerationError(message, job_id=job_id)
        return job.result


def create_video_tracker(
    settings: "Settings",
    storage: "S3ArtifactStorage | None" = None,
) -> JobTracker:
    """
    Build the video job tracker for the configured generation mode.

    Raises:
        ConfigurationError: If provider mode is configured without an API key
    """
    generation = settings.generation
    if generation.mode == "provider":
        source: ProgressSource = VeoProgressSource(
            google_client=create_google_client(settings.gemini.api_key),
            model_id=settings.gemini.video_model,
            storage=storage,
            poll_interval=generation.poll_interval_seconds,
            checkpoints=generation.checkpoints,
            url_expiry_seconds=settings.storage.url_expiry_seconds,
        )
    else:
        source = SimulatedProgressSource(
            render=render_video_placeholder,
            checkpoints=generation.checkpoints,
            tick_interval=generation.tick_interval_seconds,
        )
    logger.info(
        f"{__name__}:create_video_tracker - mode={generation.mode} "
        f"capacity={generation.job_capacity}"
    )
    return JobTracker(source, capacity=generation.job_capacity, id_prefix="video")
