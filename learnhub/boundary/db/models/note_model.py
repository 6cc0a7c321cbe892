"""
Note ORM model.

Short free-form notes shown on the learner's dashboard.

Dependencies: sqlalchemy, learnhub.boundary.db.base
System role: Note persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from learnhub.boundary.db.base import Base, OwnerMixin, TimestampMixin, UUIDMixin

DEFAULT_NOTE_COLOR = "bg-yellow-100 border-yellow-300"


class NoteModel(Base, UUIDMixin, OwnerMixin, TimestampMixin):
    """
    Note ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owner identifier
        title: Note title (non-blank)
        content: Note body
        color: Display color token chosen in the UI
        created_at: Creation timestamp (UTC)
        updated_at: Last edit timestamp (UTC); notes are listed newest edit first
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    color: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        default=DEFAULT_NOTE_COLOR,
        doc="Display color token",
    )
