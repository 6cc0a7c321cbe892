"""
Note CRUD operations.

Dependencies: sqlalchemy, learnhub.boundary.db.models
System role: Note persistence operations
"""

from learnhub.boundary.db.CRUD.base_crud import BaseCRUD
from learnhub.boundary.db.models.note_model import NoteModel


class NoteCRUD(BaseCRUD[NoteModel]):
    """CRUD operations for NoteModel. Lists most recently edited first."""

    order_by = (NoteModel.updated_at.desc(), NoteModel.id)

    def __init__(self) -> None:
        super().__init__(NoteModel)


note_crud = NoteCRUD()
