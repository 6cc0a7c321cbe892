"""
Learning module ORM model.

A generated lesson on one topic for one grade level: tutorial text, quiz,
image description, narration script and any generated media URLs.

Dependencies: sqlalchemy, learnhub.boundary.db.base
System role: Learning module persistence
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from learnhub.boundary.db.base import Base, OwnerMixin, TimestampMixin, UUIDMixin


class LearningModuleModel(Base, UUIDMixin, OwnerMixin, TimestampMixin):
    """
    Learning module ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owner identifier
        topic: Subject of the module
        grade: Target grade level
        tutorial_content: Plain-text explanation
        quiz_data: JSON array of {question, options, correctAnswer}
        video_script: Narration script
        image_description: Visual description used for image generation
        generated_image_url: Generated illustration (data URL or presigned URL)
        generated_video_url: Generated video (presigned URL or data URL)
        created_at: Creation timestamp (UTC); modules are listed newest first
    """

    __tablename__ = "learning_modules"

    topic: Mapped[str] = mapped_column(String(255), nullable=False)
    grade: Mapped[str] = mapped_column(String(64), nullable=False)
    tutorial_content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    quiz_data: Mapped[list[dict]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Array of quiz question objects",
    )
    video_script: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    generated_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    generated_video_url: Mapped[str | None] = mapped_column(Text, nullable=True)
