"""
Progress sources for generation jobs.

A progress source owns the work of one job: it advances the job by
reporting progress checkpoints and finally returns the produced artifact.
The tracker's state machine does not care whether those reports come from
a timer or from polling a real provider operation.

Dependencies: asyncio, learnhub.core.jobs.models
System role: Pluggable "advance" capability behind the job tracker
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence

from learnhub.core.jobs.models import GeneratedArtifact, GenerationConfig

ProgressReporter = Callable[[int], None]
ArtifactRenderer = Callable[[str, GenerationConfig], GeneratedArtifact]
Sleeper = Callable[[float], Awaitable[None]]

DEFAULT_CHECKPOINTS: tuple[int, ...] = (25, 50, 75, 90)


class ProgressSource(ABC):
    """Drives a single job forward and produces its artifact."""

    @abstractmethod
    async def advance(
        self,
        prompt: str,
        config: GenerationConfig,
        report: ProgressReporter,
    ) -> GeneratedArtifact:
        """
        Run the generation pipeline for one job.

        Args:
            prompt: Originating prompt
            config: Provider pass-through options
            report: Callback accepting a progress percentage

        Returns:
            GeneratedArtifact: The finished artifact

        Raises:
            Exception: Any error marks the job as failed
        """
        ...


class SimulatedProgressSource(ProgressSource):
    """Timer-driven source: fixed checkpoints at fixed intervals, then render.

    Stands in for submit -> render -> encode -> finalize stages of a real
    provider pipeline.
    """

    def __init__(
        self,
        render: ArtifactRenderer,
        checkpoints: Sequence[int] = DEFAULT_CHECKPOINTS,
        tick_interval: float = 1.0,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        """
        Args:
            render: Produces the final artifact from prompt and config
            checkpoints: Ordered progress values reported while running
            tick_interval: Seconds to wait before each checkpoint
            sleep: Awaitable sleep function (injected in tests)
        """
        self._render = render
        self._checkpoints = tuple(checkpoints)
        self._tick_interval = tick_interval
        self._sleep = sleep

    async def advance(
        self,
        prompt: str,
        config: GenerationConfig,
        report: ProgressReporter,
    ) -> GeneratedArtifact:
        for checkpoint in self._checkpoints:
            await self._sleep(self._tick_interval)
            report(checkpoint)
        return self._render(prompt, config)
