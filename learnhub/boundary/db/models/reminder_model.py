"""
Reminder ORM model.

Dated study reminders with a priority and completion flag.

Dependencies: sqlalchemy, learnhub.boundary.db.base
System role: Reminder persistence
"""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from learnhub.boundary.db.base import Base, OwnerMixin, TimestampMixin, UUIDMixin


class ReminderPriority(str, enum.Enum):
    """Reminder priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ReminderModel(Base, UUIDMixin, OwnerMixin, TimestampMixin):
    """
    Reminder ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owner identifier
        title: What to be reminded about
        remind_at: When the reminder is due (UTC); reminders are listed soonest first
        priority: high, medium or low
        completed: Whether the reminder has been checked off
    """

    __tablename__ = "reminders"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    remind_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    priority: Mapped[ReminderPriority] = mapped_column(
        Enum(
            ReminderPriority,
            native_enum=False,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=ReminderPriority.MEDIUM,
    )
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
