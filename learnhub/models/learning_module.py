"""
Learning module domain models and schemas.

Dependencies: pydantic
System role: Learning module API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateLearningModuleRequest(BaseModel):
    """Request schema for generating a learning module."""

    topic: str = Field(..., min_length=1, max_length=255, description="Subject to teach")
    grade: str = Field(..., min_length=1, max_length=64, description="Student grade level")


class QuizQuestionResponse(BaseModel):
    """Quiz question as stored on a module."""

    question: str
    options: list[str]
    correctAnswer: str


class LearningModuleResponse(BaseModel):
    """Response schema for a learning module."""

    id: str
    topic: str
    grade: str
    tutorial_content: str
    quiz_data: list[QuizQuestionResponse]
    video_script: str
    image_description: str
    generated_image_url: str | None = None
    generated_video_url: str | None = None
    created_at: datetime
