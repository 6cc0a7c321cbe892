"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class CreatedResponse(BaseModel):
    """Response carrying the id of a created record."""

    id: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    message: str
