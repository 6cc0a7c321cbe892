"""
Learning module video schemas.

Dependencies: pydantic
System role: Video endpoint API contracts
"""

from typing import Any

from pydantic import BaseModel, field_validator


class GenerateVideoRequest(BaseModel):
    """Request body of POST /generate-video. Presence is checked by the service."""

    moduleId: str | None = None
    script: str | None = None

    @field_validator("moduleId", "script", mode="before")
    @classmethod
    def _non_string_as_missing(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class GenerateVideoResponse(BaseModel):
    """Video URL written onto the module."""

    videoUrl: str
