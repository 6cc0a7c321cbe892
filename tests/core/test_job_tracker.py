"""
Test suite for JobTracker.

Tests the job lifecycle (pending -> running -> completed/failed), monotonic
progress, retention window eviction and waiting on jobs.

System role: Verification of asynchronous generation job tracking
"""

import asyncio

import pytest

from learnhub.core.exceptions import ValidationError
from learnhub.core.jobs import (
    FAILURE_MESSAGE,
    GeneratedArtifact,
    GenerationConfig,
    JobStatus,
    JobTracker,
    ProgressSource,
    SimulatedProgressSource,
)
from learnhub.core.generation.placeholders import render_video_placeholder


class ScriptedSource(ProgressSource):
    """Reports fixed progress values, then blocks until released."""

    def __init__(self, reports=(), error: Exception | None = None) -> None:
        self.reports = list(reports)
        self.error = error
        self.gate = asyncio.Event()
        self.calls: list[tuple[str, GenerationConfig]] = []

    async def advance(self, prompt, config, report):
        self.calls.append((prompt, config))
        for progress in self.reports:
            report(progress)
        await self.gate.wait()
        if self.error is not None:
            raise self.error
        return GeneratedArtifact(
            url="data:text/plain;base64,aGk=",
            prompt=prompt,
            mime_type="text/plain",
            config=config,
        )


async def settle() -> None:
    """Let scheduled driver tasks run until they block."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def simulated_tracker(instant_sleep) -> JobTracker:
    source = SimulatedProgressSource(render=render_video_placeholder, sleep=instant_sleep)
    return JobTracker(source, capacity=10)


class TestJobTrackerSubmit:
    """Test suite for JobTracker.submit()."""

    @pytest.mark.asyncio
    async def test_submit_should_return_prefixed_id_and_start_pending(self) -> None:
        tracker = JobTracker(ScriptedSource())

        job_id = tracker.submit("A volcano erupting")

        assert job_id.startswith("video_")
        job = tracker.get(job_id)
        assert job.status is JobStatus.PENDING
        assert job.progress == 0
        assert job.result is None
        assert job.display_status == "generating"
        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_submit_should_generate_unique_ids(self) -> None:
        tracker = JobTracker(ScriptedSource())

        ids = {tracker.submit(f"prompt {i}") for i in range(5)}

        assert len(ids) == 5
        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_submit_should_reject_empty_prompt(self) -> None:
        tracker = JobTracker(ScriptedSource())

        with pytest.raises(ValidationError):
            tracker.submit("   ")

        assert tracker.list() == []

    @pytest.mark.asyncio
    async def test_submit_should_pass_config_to_source(self) -> None:
        source = ScriptedSource()
        tracker = JobTracker(source)
        config = GenerationConfig(aspect_ratio="16:9")

        tracker.submit("Ocean waves", config)
        await settle()

        assert source.calls == [("Ocean waves", config)]
        await tracker.aclose()

    def test_capacity_below_one_should_raise(self) -> None:
        with pytest.raises(ValueError):
            JobTracker(ScriptedSource(), capacity=0)


class TestJobTrackerLifecycle:
    """Test suite for job state transitions."""

    @pytest.mark.asyncio
    async def test_job_should_be_running_after_driver_starts(self) -> None:
        tracker = JobTracker(ScriptedSource())
        job_id = tracker.submit("Solar system")

        await settle()

        job = tracker.get(job_id)
        assert job.status is JobStatus.RUNNING
        assert job.progress == 10
        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_simulated_job_should_complete_with_artifact(
        self, simulated_tracker: JobTracker
    ) -> None:
        job_id = simulated_tracker.submit("Photosynthesis explained")

        job = await simulated_tracker.wait(job_id, timeout=5)

        assert job.status is JobStatus.COMPLETED
        assert job.progress == 100
        assert job.error is None
        assert job.result.prompt == "Photosynthesis explained"
        assert job.result.url.startswith("data:image/svg+xml;base64,")
        assert simulated_tracker.get(job_id).status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_failing_source_should_mark_job_failed_with_generic_error(self) -> None:
        source = ScriptedSource(reports=[50], error=RuntimeError("GPU on fire"))
        tracker = JobTracker(source)
        job_id = tracker.submit("Doomed video")
        await settle()
        source.gate.set()

        job = await tracker.wait(job_id, timeout=5)

        assert job.status is JobStatus.FAILED
        assert job.progress == 0
        assert job.result is None
        assert job.error == FAILURE_MESSAGE
        assert "GPU" not in job.error
        assert job.display_status == "failed"

    @pytest.mark.asyncio
    async def test_snapshots_should_not_change_after_being_returned(self) -> None:
        source = ScriptedSource()
        tracker = JobTracker(source)
        job_id = tracker.submit("Snapshot me")
        await settle()
        before = tracker.get(job_id)

        source.gate.set()
        await tracker.wait(job_id, timeout=5)

        assert before.status is JobStatus.RUNNING
        assert tracker.get(job_id).status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_get_without_progress_in_between_should_be_identical(self) -> None:
        source = ScriptedSource(reports=[40])
        tracker = JobTracker(source)
        job_id = tracker.submit("Stable snapshot")
        await settle()

        first = tracker.get(job_id)
        second = tracker.get(job_id)

        assert first == second
        assert first.model_dump() == second.model_dump()

        source.gate.set()
        await tracker.wait(job_id, timeout=5)
        assert tracker.get(job_id) == tracker.get(job_id)

    @pytest.mark.asyncio
    async def test_polled_status_should_never_move_backward(
        self, simulated_tracker: JobTracker
    ) -> None:
        order = [JobStatus.PENDING, JobStatus.RUNNING, JobStatus.COMPLETED]
        job_id = simulated_tracker.submit("Water cycle")
        observed = []

        for _ in range(200):
            job = simulated_tracker.get(job_id)
            observed.append((order.index(job.status), job.progress))
            if job.status.is_terminal:
                break
            await asyncio.sleep(0)

        assert observed[0] == (0, 0)
        assert observed[-1] == (2, 100)
        assert observed == sorted(observed)
        assert len({status for status, _ in observed}) == 3

    def test_submit_outside_event_loop_should_not_register_job(self) -> None:
        tracker = JobTracker(ScriptedSource())

        with pytest.raises(RuntimeError):
            tracker.submit("No loop")

        assert tracker.list() == []

    @pytest.mark.asyncio
    async def test_aclose_should_cancel_running_jobs(self) -> None:
        tracker = JobTracker(ScriptedSource())
        job_id = tracker.submit("Never finishes")
        await settle()

        await tracker.aclose()

        job = tracker.get(job_id)
        assert job.status is JobStatus.FAILED
        assert job.error == FAILURE_MESSAGE


class TestJobTrackerProgress:
    """Test suite for progress reporting."""

    @pytest.mark.asyncio
    async def test_progress_should_never_decrease(self) -> None:
        tracker = JobTracker(ScriptedSource(reports=[50, 30]))
        job_id = tracker.submit("Monotonic")

        await settle()

        assert tracker.get(job_id).progress == 50
        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_progress_should_stay_below_100_while_running(self) -> None:
        tracker = JobTracker(ScriptedSource(reports=[120]))
        job_id = tracker.submit("Overshoot")

        await settle()

        job = tracker.get(job_id)
        assert job.status is JobStatus.RUNNING
        assert job.progress == 99
        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_simulated_source_should_report_each_checkpoint(self, instant_sleep) -> None:
        seen: list[int] = []
        source = SimulatedProgressSource(
            render=render_video_placeholder,
            checkpoints=(25, 50, 75, 90),
            tick_interval=1.5,
            sleep=instant_sleep,
        )

        artifact = await source.advance("Clouds", GenerationConfig(), seen.append)

        assert seen == [25, 50, 75, 90]
        assert instant_sleep.delays == [1.5, 1.5, 1.5, 1.5]
        assert artifact.prompt == "Clouds"


class TestJobTrackerRetention:
    """Test suite for cleanup() and the retention window."""

    @pytest.mark.asyncio
    async def test_submit_beyond_capacity_should_evict_oldest(
        self, instant_sleep
    ) -> None:
        source = SimulatedProgressSource(render=render_video_placeholder, sleep=instant_sleep)
        tracker = JobTracker(source, capacity=2)

        first = tracker.submit("first")
        second = tracker.submit("second")
        third = tracker.submit("third")

        assert tracker.get(first) is None
        assert [job.id for job in tracker.list()] == [third, second]
        await tracker.aclose()

    @pytest.mark.asyncio
    async def test_cleanup_should_return_zero_within_capacity(
        self, simulated_tracker: JobTracker
    ) -> None:
        simulated_tracker.submit("only one")

        assert simulated_tracker.cleanup() == 0
        assert len(simulated_tracker.list()) == 1
        await simulated_tracker.aclose()

    @pytest.mark.asyncio
    async def test_list_should_return_most_recent_first(
        self, simulated_tracker: JobTracker
    ) -> None:
        ids = [simulated_tracker.submit(f"job {i}") for i in range(3)]

        assert [job.id for job in simulated_tracker.list()] == list(reversed(ids))
        await simulated_tracker.aclose()

    @pytest.mark.asyncio
    async def test_evicted_running_job_should_keep_running(self) -> None:
        source = ScriptedSource()
        tracker = JobTracker(source, capacity=1)
        evicted = tracker.submit("evicted but alive")
        tracker.submit("newer")
        await settle()
        assert tracker.get(evicted) is None

        source.gate.set()
        job = await tracker.wait(evicted, timeout=5)

        assert job.status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_eleventh_submission_at_default_capacity_should_evict_exactly_one(
        self, instant_sleep
    ) -> None:
        source = SimulatedProgressSource(render=render_video_placeholder, sleep=instant_sleep)
        tracker = JobTracker(source)

        ids = [tracker.submit(f"lesson {i}") for i in range(11)]

        retained = [job.id for job in tracker.list()]
        assert tracker.capacity == 10
        assert retained == list(reversed(ids[1:]))
        assert set(ids) - set(retained) == {ids[0]}
        assert tracker.cleanup() == 0
        await tracker.aclose()


class TestJobTrackerWait:
    """Test suite for wait()."""

    @pytest.mark.asyncio
    async def test_wait_unknown_job_should_return_none(
        self, simulated_tracker: JobTracker
    ) -> None:
        assert await simulated_tracker.wait("video_missing") is None

    @pytest.mark.asyncio
    async def test_wait_should_raise_on_timeout_without_cancelling(self) -> None:
        source = ScriptedSource()
        tracker = JobTracker(source)
        job_id = tracker.submit("Slow")

        with pytest.raises(asyncio.TimeoutError):
            await tracker.wait(job_id, timeout=0.01)

        assert tracker.get(job_id).status is JobStatus.RUNNING
        source.gate.set()
        assert (await tracker.wait(job_id, timeout=5)).status is JobStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_wait_finished_job_should_return_snapshot(
        self, simulated_tracker: JobTracker
    ) -> None:
        job_id = simulated_tracker.submit("Done already")
        await simulated_tracker.wait(job_id, timeout=5)

        job = await simulated_tracker.wait(job_id)

        assert job.status is JobStatus.COMPLETED


class TestJobTrackerDownload:
    """Test suite for download()."""

    @pytest.mark.asyncio
    async def test_download_should_write_artifact_bytes(
        self, simulated_tracker: JobTracker, tmp_path
    ) -> None:
        target = await simulated_tracker.download(
            "data:text/plain;base64,aGVsbG8=", "hello.txt", directory=tmp_path
        )

        assert target == tmp_path / "hello.txt"
        assert target.read_bytes() == b"hello"

    @pytest.mark.asyncio
    async def test_download_should_propagate_malformed_reference(
        self, simulated_tracker: JobTracker, tmp_path
    ) -> None:
        with pytest.raises(ValueError):
            await simulated_tracker.download("data:broken", "x.bin", directory=tmp_path)
