"""
Learning module CRUD operations.

Dependencies: sqlalchemy, learnhub.boundary.db.models
System role: Learning module persistence operations
"""

from learnhub.boundary.db.CRUD.base_crud import BaseCRUD
from learnhub.boundary.db.models.learning_module_model import LearningModuleModel


class LearningModuleCRUD(BaseCRUD[LearningModuleModel]):
    """CRUD operations for LearningModuleModel. Lists newest first."""

    order_by = (LearningModuleModel.created_at.desc(), LearningModuleModel.id)

    def __init__(self) -> None:
        super().__init__(LearningModuleModel)


learning_module_crud = LearningModuleCRUD()
