"""
Generation job tracking.

In-memory, bounded tracker for long-running generation jobs plus the
pluggable progress sources that drive them.
"""

from learnhub.core.jobs.models import (
    GeneratedArtifact,
    GenerationConfig,
    Job,
    JobStatus,
)
from learnhub.core.jobs.progress import (
    DEFAULT_CHECKPOINTS,
    ProgressReporter,
    ProgressSource,
    SimulatedProgressSource,
)
from learnhub.core.jobs.tracker import FAILURE_MESSAGE, JobTracker

__all__ = [
    "DEFAULT_CHECKPOINTS",
    "FAILURE_MESSAGE",
    "GeneratedArtifact",
    "GenerationConfig",
    "Job",
    "JobStatus",
    "JobTracker",
    "ProgressReporter",
    "ProgressSource",
    "SimulatedProgressSource",
]
