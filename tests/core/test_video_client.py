"""
Test suite for video generation.

Tests Veo operation polling with a mocked google-genai client, the blocking
VideoGenerationClient front door and tracker construction from settings.

System role: Verification of asynchronous video generation
"""

import asyncio
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from learnhub.configs import Settings
from learnhub.configs.gemini import GeminiSettings
from learnhub.configs.generation import GenerationSettings
from learnhub.core.exceptions import ConfigurationError, GenerationError, ProviderError
from learnhub.core.generation.video_client import (
    VeoProgressSource,
    VideoGenerationClient,
    create_video_tracker,
)
from learnhub.core.jobs import (
    FAILURE_MESSAGE,
    GenerationConfig,
    JobStatus,
    JobTracker,
    ProgressSource,
    SimulatedProgressSource,
)
from learnhub.core.generation.placeholders import render_video_placeholder
from learnhub.core.jobs.artifacts import to_data_url


def _operation(done: bool, videos=None, error=None) -> SimpleNamespace:
    response = SimpleNamespace(generated_videos=videos) if videos is not None else None
    return SimpleNamespace(done=done, error=error, response=response)


def _video(data: bytes | None = b"mp4-bytes", mime_type: str | None = "video/mp4"):
    return SimpleNamespace(video=SimpleNamespace(video_bytes=data, mime_type=mime_type))


@pytest.fixture
def google_client() -> MagicMock:
    return MagicMock()


class TestVeoProgressSource:
    @pytest.mark.asyncio
    async def test_should_poll_until_done_and_report_checkpoints(
        self, google_client: MagicMock, instant_sleep
    ) -> None:
        google_client.models.generate_videos.return_value = _operation(False)
        google_client.operations.get.side_effect = [
            _operation(False),
            _operation(True, videos=[_video()]),
        ]
        source = VeoProgressSource(google_client, poll_interval=7.0, sleep=instant_sleep)
        seen: list[int] = []

        artifact = await source.advance("A volcano", GenerationConfig(aspect_ratio="16:9"), seen.append)

        assert seen == [25, 50]
        assert instant_sleep.delays == [7.0, 7.0]
        assert artifact.url == to_data_url(b"mp4-bytes", "video/mp4")
        assert artifact.mime_type == "video/mp4"
        config = google_client.models.generate_videos.call_args.kwargs["config"]
        assert config.number_of_videos == 1
        assert config.aspect_ratio == "16:9"

    @pytest.mark.asyncio
    async def test_should_download_video_without_inline_bytes(
        self, google_client: MagicMock, instant_sleep
    ) -> None:
        video = _video(data=None)
        google_client.models.generate_videos.return_value = _operation(True, videos=[video])

        def download(file):
            file.video_bytes = b"downloaded"

        google_client.files.download.side_effect = download
        source = VeoProgressSource(google_client, sleep=instant_sleep)

        artifact = await source.advance("Rain", GenerationConfig(), lambda _: None)

        google_client.files.download.assert_called_once_with(file=video.video)
        assert artifact.url == to_data_url(b"downloaded", "video/mp4")

    @pytest.mark.asyncio
    async def test_should_upload_to_storage_when_configured(
        self, google_client: MagicMock, instant_sleep
    ) -> None:
        google_client.models.generate_videos.return_value = _operation(True, videos=[_video()])
        storage = MagicMock()
        storage.upload_bytes = AsyncMock()
        storage.generate_presigned_download_url.return_value = (
            "https://bucket.example.com/signed",
            datetime.now(timezone.utc),
        )
        source = VeoProgressSource(
            google_client, storage=storage, url_expiry_seconds=120, sleep=instant_sleep
        )

        artifact = await source.advance("Rain", GenerationConfig(), lambda _: None)

        assert artifact.url == "https://bucket.example.com/signed"
        s3_key, data, mime_type = storage.upload_bytes.call_args.args
        assert s3_key.startswith("generated-videos/") and s3_key.endswith(".mp4")
        assert data == b"mp4-bytes"
        assert mime_type == "video/mp4"
        storage.generate_presigned_download_url.assert_called_once_with(s3_key, expires_in=120)
        assert artifact.storage_key == s3_key

    @pytest.mark.asyncio
    async def test_operation_error_should_raise_provider_error(
        self, google_client: MagicMock, instant_sleep
    ) -> None:
        google_client.models.generate_videos.return_value = _operation(
            True, error={"code": 3, "message": "unsupported prompt"}
        )
        source = VeoProgressSource(google_client, sleep=instant_sleep)

        with pytest.raises(ProviderError, match="unsupported prompt"):
            await source.advance("Rain", GenerationConfig(), lambda _: None)

    @pytest.mark.asyncio
    async def test_empty_result_should_be_reported_as_filtered(
        self, google_client: MagicMock, instant_sleep
    ) -> None:
        google_client.models.generate_videos.return_value = _operation(True, videos=[])
        source = VeoProgressSource(google_client, sleep=instant_sleep)

        with pytest.raises(ProviderError) as exc_info:
            await source.advance("Rain", GenerationConfig(), lambda _: None)

        assert exc_info.value.kind == ProviderError.CONTENT_POLICY

    @pytest.mark.asyncio
    async def test_submit_failure_should_be_described(
        self, google_client: MagicMock, instant_sleep
    ) -> None:
        google_client.models.generate_videos.side_effect = RuntimeError("API key not valid")
        source = VeoProgressSource(google_client, sleep=instant_sleep)

        with pytest.raises(ProviderError) as exc_info:
            await source.advance("Rain", GenerationConfig(), lambda _: None)

        assert exc_info.value.kind == ProviderError.INVALID_KEY


class BlockingSource(ProgressSource):
    async def advance(self, prompt, config, report):
        await asyncio.Event().wait()


class FailingSource(ProgressSource):
    async def advance(self, prompt, config, report):
        raise RuntimeError("render crashed")


class TestVideoGenerationClient:
    @pytest.mark.asyncio
    async def test_generate_should_return_completed_artifact(self, instant_sleep) -> None:
        tracker = JobTracker(
            SimulatedProgressSource(render=render_video_placeholder, sleep=instant_sleep)
        )
        client = VideoGenerationClient(tracker)

        artifact = await client.generate("Narration about volcanoes")

        assert artifact.prompt == "Narration about volcanoes"
        assert tracker.list()[0].status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_generate_should_raise_with_job_error_on_failure(self) -> None:
        client = VideoGenerationClient(JobTracker(FailingSource()))

        with pytest.raises(GenerationError) as exc_info:
            await client.generate("Script")

        assert exc_info.value.message == FAILURE_MESSAGE
        assert exc_info.value.details["job_id"].startswith("video_")

    @pytest.mark.asyncio
    async def test_generate_should_raise_on_timeout(self) -> None:
        tracker = JobTracker(BlockingSource())
        client = VideoGenerationClient(tracker, wait_timeout=0.01)

        with pytest.raises(GenerationError, match="timed out"):
            await client.generate("Script")

        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_start_should_return_job_id_immediately(self) -> None:
        tracker = JobTracker(BlockingSource())
        client = VideoGenerationClient(tracker)

        job_id = client.start("Script")

        assert client.tracker.get(job_id).status is JobStatus.PENDING
        await tracker.aclose()


class TestCreateVideoTracker:
    def test_simulated_mode_should_use_configured_capacity(self) -> None:
        settings = Settings(generation=GenerationSettings(mode="simulated", job_capacity=3))

        tracker = create_video_tracker(settings)

        assert tracker.capacity == 3

    def test_provider_mode_without_key_should_raise(self) -> None:
        settings = Settings(
            generation=GenerationSettings(mode="provider"),
            gemini=GeminiSettings(api_key=None),
        )

        with pytest.raises(ConfigurationError):
            create_video_tracker(settings)
