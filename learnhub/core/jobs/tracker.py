"""
Job state management logic.

Tracks long-running generation jobs (video synthesis), drives each one
forward on a detached asyncio task, and serves point-in-time snapshots to
polling consumers. Only the most recent `capacity` jobs are retained.

Each job is mutated exclusively by its own driver task; pollers only read
copies. The tracker runs on a single event loop and needs no locking.

Dependencies: asyncio, learnhub.core.jobs, learnhub.observability.log_utils
System role: Job tracking business logic
"""

import asyncio
import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from learnhub.core.exceptions import ValidationError
from learnhub.core.jobs.artifacts import load_artifact_bytes
from learnhub.core.jobs.models import (
    GeneratedArtifact,
    GenerationConfig,
    Job,
    JobStatus,
    utcnow,
)
from learnhub.core.jobs.progress import ProgressSource
from learnhub.observability.log_utils import log_exception_with_context, safe_log_value

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
RUNNING_PROGRESS = 10
MAX_RUNNING_PROGRESS = 99
FAILURE_MESSAGE = "Generation failed. Please try again."

_NEXT_STATES: dict[JobStatus, frozenset[JobStatus]] = {
    JobStatus.PENDING: frozenset({JobStatus.RUNNING, JobStatus.FAILED}),
    JobStatus.RUNNING: frozenset({JobStatus.COMPLETED, JobStatus.FAILED}),
    JobStatus.COMPLETED: frozenset(),
    JobStatus.FAILED: frozenset(),
}


@dataclass
class _JobRecord:
    """Mutable tracker-side state of one job."""

    id: str
    prompt: str
    config: GenerationConfig
    status: JobStatus = JobStatus.PENDING
    progress: int = 0
    result: GeneratedArtifact | None = None
    error: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def snapshot(self) -> Job:
        return Job(
            id=self.id,
            prompt=self.prompt,
            status=self.status,
            progress=self.progress,
            result=self.result,
            error=self.error,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def transition(self, status: JobStatus, progress: int) -> None:
        if status not in _NEXT_STATES[self.status]:
            raise RuntimeError(f"Illegal job transition {self.status.value} -> {status.value}")
        self.status = status
        self.progress = progress
        self.updated_at = utcnow()


class JobTracker:
    """
    Tracker for asynchronous generation jobs.

    Owns the job map; construct one per job kind and share it by reference.
    """

    def __init__(
        self,
        source: ProgressSource,
        capacity: int = DEFAULT_CAPACITY,
        id_prefix: str = "video",
    ) -> None:
        """
        Initialize job tracker.

        Args:
            source: Progress source that performs the work of each job
            capacity: Number of most recent jobs to retain
            id_prefix: Prefix of generated job identifiers
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._source = source
        self._capacity = capacity
        self._id_prefix = id_prefix
        self._jobs: OrderedDict[str, _JobRecord] = OrderedDict()
        self._tasks: dict[str, asyncio.Task[Job]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def submit(self, prompt: str, config: GenerationConfig | None = None) -> str:
        """
        Register a new job and start driving it in the background.

        Must be called from a running event loop. Returns immediately.

        Args:
            prompt: Generation prompt (non-empty)
            config: Provider pass-through options

        Returns:
            str: New job identifier

        Raises:
            ValidationError: If prompt is empty
            RuntimeError: If no event loop is running
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt must not be empty", field="prompt")

        loop = asyncio.get_running_loop()
        job_id = f"{self._id_prefix}_{uuid.uuid4().hex}"
        record = _JobRecord(id=job_id, prompt=prompt, config=config or GenerationConfig())
        self._jobs[job_id] = record

        task = loop.create_task(self._drive(record), name=f"generation-job-{job_id}")
        self._tasks[job_id] = task
        task.add_done_callback(lambda _task, job_id=job_id: self._tasks.pop(job_id, None))

        logger.info(
            f"{__name__}:submit - job_id={job_id} "
            f"prompt={safe_log_value(prompt, max_length=80)}"
        )
        self.cleanup()
        return job_id

    def get(self, job_id: str) -> Job | None:
        """
        Get a snapshot of a job.

        Args:
            job_id: Job identifier

        Returns:
            Job | None: Current snapshot, or None when the id is unknown or evicted
        """
        record = self._jobs.get(job_id)
        return record.snapshot() if record else None

    def list(self) -> list[Job]:
        """
        List retained jobs.

        Returns:
            list[Job]: Snapshots ordered most recently created first
        """
        return [record.snapshot() for record in reversed(self._jobs.values())]

    def cleanup(self) -> int:
        """
        Truncate retained jobs to the most recent `capacity`.

        Evicts oldest first regardless of status. An evicted job that is still
        running keeps running; only its tracking entry is discarded.

        Returns:
            int: Number of evicted jobs
        """
        evicted = 0
        while len(self._jobs) > self._capacity:
            job_id, record = self._jobs.popitem(last=False)
            evicted += 1
            if not record.status.is_terminal:
                logger.warning(
                    f"{__name__}:cleanup - evicted non-terminal job "
                    f"job_id={job_id} status={record.status.value}"
                )
        if evicted:
            logger.debug(f"{__name__}:cleanup - evicted={evicted} retained={len(self._jobs)}")
        return evicted

    async def wait(self, job_id: str, timeout: float | None = None) -> Job | None:
        """
        Wait for a job to reach a terminal state.

        Works for jobs evicted while running, as long as their driver task is alive.

        Args:
            job_id: Job identifier
            timeout: Seconds to wait (None waits indefinitely)

        Returns:
            Job | None: Terminal snapshot, or None when the id is unknown

        Raises:
            asyncio.TimeoutError: If the job does not finish within timeout
        """
        task = self._tasks.get(job_id)
        if task is None:
            return self.get(job_id)
        return await asyncio.wait_for(asyncio.shield(task), timeout)

    async def download(
        self,
        artifact_ref: str,
        filename: str,
        directory: Path | None = None,
    ) -> Path:
        """
        Save an artifact to a file. Does not affect job state.

        Args:
            artifact_ref: Data URL, http(s) URL or local path
            filename: Target file name
            directory: Target directory (current directory when None)

        Returns:
            Path: Written file path

        Raises:
            ValueError, OSError, httpx.HTTPError: Propagated from materialization or write
        """
        data, _ = await load_artifact_bytes(artifact_ref)
        target = (directory or Path.cwd()) / filename
        await asyncio.to_thread(target.write_bytes, data)
        logger.info(f"{__name__}:download - wrote {len(data)} bytes to {target}")
        return target

    async def aclose(self) -> None:
        """Cancel outstanding driver tasks (application shutdown)."""
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info(f"{__name__}:aclose - cancelled {len(tasks)} running job(s)")

    async def _drive(self, record: _JobRecord) -> Job:
        """Advance one job from pending to a terminal state."""
        record.transition(JobStatus.RUNNING, RUNNING_PROGRESS)

        def report(progress: int) -> None:
            if record.status is not JobStatus.RUNNING:
                return
            value = max(record.progress, min(int(progress), MAX_RUNNING_PROGRESS))
            if value != record.progress:
                record.progress = value
                record.updated_at = utcnow()

        try:
            artifact = await self._source.advance(record.prompt, record.config, report)
        except asyncio.CancelledError:
            record.error = FAILURE_MESSAGE
            record.transition(JobStatus.FAILED, 0)
            raise
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_drive - job failed job_id={record.id}",
                e,
                job_id=record.id,
                prompt=record.prompt,
            )
            record.error = FAILURE_MESSAGE
            record.transition(JobStatus.FAILED, 0)
            return record.snapshot()

        record.result = artifact
        record.transition(JobStatus.COMPLETED, 100)
        logger.info(f"{__name__}:_drive - job completed job_id={record.id}")
        return record.snapshot()
