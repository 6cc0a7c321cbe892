"""
Job and artifact domain models.

Job snapshots returned to pollers, immutable generated artifacts and the
pass-through generation configuration.

Dependencies: pydantic
System role: Data contracts of the job tracker
"""

import enum
import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class JobStatus(str, enum.Enum):
    """
    Generation job states.

    PENDING: Accepted, driver task not yet started
    RUNNING: Driver task advancing through progress checkpoints
    COMPLETED: Artifact produced; result is set
    FAILED: Pipeline raised; no result
    """

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)

    @property
    def display_status(self) -> str:
        """Collapsed status used by image-style callers: generating/completed/failed."""
        if self.is_terminal:
            return self.value
        return "generating"


class GenerationConfig(BaseModel):
    """Provider pass-through options. Unset fields fall back to provider defaults."""

    model_config = ConfigDict(frozen=True)

    number_of_artifacts: int | None = Field(default=None, ge=1, le=4)
    aspect_ratio: Literal["1:1", "16:9", "9:16"] | None = None
    style: Literal[
        "photographic", "digital_art", "sketch", "watercolor", "oil_painting"
    ] | None = None


class GeneratedArtifact(BaseModel):
    """Output of a generation request. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: f"artifact_{uuid.uuid4().hex}")
    url: str = Field(description="Data URL, presigned URL or local path of the artifact")
    prompt: str
    timestamp: datetime = Field(default_factory=utcnow)
    mime_type: str = "application/octet-stream"
    config: GenerationConfig = Field(default_factory=GenerationConfig)
    storage_key: str | None = Field(
        default=None, description="Artifact bucket key when the artifact was stored by its source"
    )


class Job(BaseModel):
    """Point-in-time snapshot of a tracked generation job."""

    model_config = ConfigDict(frozen=True)

    id: str
    prompt: str
    status: JobStatus
    progress: int = Field(ge=0, le=100)
    result: GeneratedArtifact | None = None
    error: str | None = None
    created_at: datetime
    updated_at: datetime

    @property
    def display_status(self) -> str:
        return self.status.display_status
