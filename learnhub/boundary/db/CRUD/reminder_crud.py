"""
Reminder CRUD operations.

Dependencies: sqlalchemy, learnhub.boundary.db.models
System role: Reminder persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.boundary.db.CRUD.base_crud import BaseCRUD
from learnhub.boundary.db.models.reminder_model import ReminderModel


class ReminderCRUD(BaseCRUD[ReminderModel]):
    """CRUD operations for ReminderModel. Lists soonest due first."""

    order_by = (ReminderModel.remind_at.asc(), ReminderModel.id)

    def __init__(self) -> None:
        super().__init__(ReminderModel)

    async def get_pending_by_owner(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[ReminderModel]:
        """
        Retrieve a user's reminders that are not yet completed.

        Args:
            session: Async database session
            user_id: Owner identifier

        Returns:
            Sequence of incomplete reminders, soonest first
        """
        stmt = (
            select(ReminderModel)
            .where(ReminderModel.user_id == user_id, ReminderModel.completed.is_(False))
            .order_by(*self.order_by)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


reminder_crud = ReminderCRUD()
