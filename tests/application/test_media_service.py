"""
Test suite for MediaService.

Runs the simulated image client and a simulated video tracker.

System role: Verification of media generation orchestration
"""

import pytest

from learnhub.application.services.media_service import MediaService
from learnhub.core.exceptions import ValidationError
from learnhub.core.generation import ImageGenerationClient, VideoGenerationClient
from learnhub.core.generation.placeholders import render_video_placeholder
from learnhub.core.jobs import GenerationConfig, JobStatus, JobTracker, SimulatedProgressSource


@pytest.fixture
def tracker(instant_sleep) -> JobTracker:
    source = SimulatedProgressSource(render=render_video_placeholder, sleep=instant_sleep)
    return JobTracker(source, capacity=2)


@pytest.fixture
def media_service(tracker: JobTracker) -> MediaService:
    return MediaService(ImageGenerationClient(), VideoGenerationClient(tracker))


@pytest.mark.asyncio
async def test_generate_images_should_return_artifacts(media_service: MediaService) -> None:
    images = await media_service.generate_images("Rainbow", GenerationConfig(number_of_artifacts=2))

    assert len(images) == 2


@pytest.mark.asyncio
async def test_video_job_should_be_pollable(media_service: MediaService, tracker: JobTracker) -> None:
    job_id = media_service.start_video("Rainbow forming")

    assert media_service.get_job(job_id).status is JobStatus.PENDING
    await tracker.wait(job_id, timeout=5)
    assert media_service.get_job(job_id).status is JobStatus.COMPLETED
    assert media_service.get_job("video_unknown") is None


@pytest.mark.asyncio
async def test_cleanup_jobs_should_report_evicted_and_retained(
    media_service: MediaService, tracker: JobTracker
) -> None:
    for i in range(3):
        media_service.start_video(f"clip {i}")

    assert media_service.cleanup_jobs() == (0, 2)
    assert len(media_service.list_jobs()) == 2
    await tracker.aclose()


@pytest.mark.asyncio
async def test_job_artifact_should_return_bytes_and_filename(
    media_service: MediaService, tracker: JobTracker
) -> None:
    job_id = media_service.start_video("Rainbow forming")
    job = await tracker.wait(job_id, timeout=5)

    data, mime_type, filename = await media_service.job_artifact(job)

    assert data.startswith(b"<svg")
    assert mime_type == "image/svg+xml"
    assert filename == f"{job_id}.svg"


@pytest.mark.asyncio
async def test_job_artifact_of_unfinished_job_should_raise(
    media_service: MediaService, tracker: JobTracker
) -> None:
    job_id = media_service.start_video("Still rendering")

    with pytest.raises(ValidationError):
        await media_service.job_artifact(media_service.get_job(job_id))

    await tracker.aclose()
