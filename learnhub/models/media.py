"""
Media generation models and schemas.

Dependencies: pydantic, learnhub.core.jobs
System role: Image and video generation API contracts
"""

from pydantic import BaseModel, Field

from learnhub.core.jobs.models import GeneratedArtifact, GenerationConfig


class GenerateMediaRequest(BaseModel):
    """Request schema for image or video generation."""

    prompt: str = Field(..., min_length=1, description="What to generate")
    config: GenerationConfig = Field(default_factory=GenerationConfig)


class ImagesResponse(BaseModel):
    """Synchronous image generation result."""

    images: list[GeneratedArtifact]


class VideoJobAcceptedResponse(BaseModel):
    """Accepted asynchronous video job."""

    job_id: str
