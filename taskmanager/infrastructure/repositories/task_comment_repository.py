"""
Task comment repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy.orm import Session

from taskmanager.domain.models.task import TaskComment
from taskmanager.domain.repositories.task_repository import TaskCommentRepository
from taskmanager.infrastructure.db.models import TaskCommentModel
from taskmanager.infrastructure.mappers.task_comment_mapper import TaskCommentMapper


class SQLAlchemyTaskCommentRepository(TaskCommentRepository):
    """SQLAlchemy implementation of task comment repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TaskCommentMapper()

    def find_by_id(self, comment_id: int) -> Optional[TaskComment]:
        model = self.session.get(TaskCommentModel, comment_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_by_task_id(self, task_id: int) -> List[TaskComment]:
        """Get the comments of a task in chronological order."""
        models = self.session.query(TaskCommentModel).filter(
            TaskCommentModel.task_id == task_id
        ).order_by(TaskCommentModel.created_at.asc(), TaskCommentModel.id.asc()).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def create(self, comment: TaskComment) -> TaskComment:
        model = self.mapper.domain_to_model(comment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def update(self, comment: TaskComment) -> Optional[TaskComment]:
        model = self.session.get(TaskCommentModel, comment.id)
        if not model:
            return None

        self.mapper.update_model(model, comment)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def delete(self, comment_id: int) -> bool:
        model = self.session.get(TaskCommentModel, comment_id)

        if not model:
            return False

        self.session.delete(model)
        self.session.commit()
        return True
