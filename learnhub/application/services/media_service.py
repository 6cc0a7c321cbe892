"""
Media service orchestrator.

Image generation (synchronous) and video generation jobs (asynchronous,
polled through the job tracker).

Dependencies: learnhub.core.generation, learnhub.core.jobs
System role: Media generation use case orchestration
"""

import logging

from learnhub.core.exceptions import ValidationError
from learnhub.core.generation.image_client import ImageGenerationClient
from learnhub.core.generation.video_client import VideoGenerationClient
from learnhub.core.jobs.artifacts import extension_for, load_artifact_bytes
from learnhub.core.jobs.models import GeneratedArtifact, GenerationConfig, Job, JobStatus

logger = logging.getLogger(__name__)


class MediaService:
    """
    Media service orchestrator.

    Thin layer over the image client and the video job tracker. Job lookups
    return None for unknown ids; callers decide how to report that.
    """

    def __init__(
        self,
        image_client: ImageGenerationClient,
        video_client: VideoGenerationClient,
    ) -> None:
        self.image_client = image_client
        self.video_client = video_client

    async def generate_images(
        self,
        prompt: str,
        config: GenerationConfig | None = None,
    ) -> list[GeneratedArtifact]:
        """Generate images and return them once finished."""
        return await self.image_client.generate(prompt, config)

    def start_video(self, prompt: str, config: GenerationConfig | None = None) -> str:
        """Start a video job. Returns the job ID immediately."""
        job_id = self.video_client.start(prompt, config)
        logger.info("Video job started", extra={"job_id": job_id})
        return job_id

    def get_job(self, job_id: str) -> Job | None:
        return self.video_client.tracker.get(job_id)

    def list_jobs(self) -> list[Job]:
        return self.video_client.tracker.list()

    def cleanup_jobs(self) -> tuple[int, int]:
        """
        Apply the retention window.

        Returns:
            tuple[int, int]: (evicted, retained)
        """
        tracker = self.video_client.tracker
        evicted = tracker.cleanup()
        return evicted, len(tracker.list())

    async def job_artifact(self, job: Job) -> tuple[bytes, str, str]:
        """
        Materialize a completed job's artifact for download.

        Returns:
            tuple[bytes, str, str]: (content, mime type, suggested filename)

        Raises:
            ValidationError: If the job has not completed
        """
        if job.status is not JobStatus.COMPLETED or job.result is None:
            raise ValidationError(
                f"Job {job.id} has no artifact (status: {job.status.value})",
                field="job_id",
            )
        data, mime_type = await load_artifact_bytes(job.result.url)
        return data, mime_type, f"{job.id}{extension_for(mime_type)}"
