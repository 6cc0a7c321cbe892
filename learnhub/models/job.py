"""
Job domain models and schemas.

Response schemas for generation job polling.

Dependencies: pydantic, learnhub.core.jobs
System role: Job status API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field

from learnhub.core.jobs.models import GeneratedArtifact, Job


class JobStatusResponse(BaseModel):
    """Response schema for job status."""

    id: str
    prompt: str
    status: str
    display_status: str = Field(description="generating, completed or failed")
    progress: int = Field(description="Progress percentage (0-100)")
    result: GeneratedArtifact | None = None
    error: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_job(cls, job: Job) -> "JobStatusResponse":
        return cls(
            id=job.id,
            prompt=job.prompt,
            status=job.status.value,
            display_status=job.display_status,
            progress=job.progress,
            result=job.result,
            error=job.error,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class JobCleanupResponse(BaseModel):
    """Result of a retention cleanup."""

    evicted: int
    retained: int
