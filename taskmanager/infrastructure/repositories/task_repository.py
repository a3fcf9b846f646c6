"""
Task repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy.orm import Session

from taskmanager.domain.models.task import Task
from taskmanager.domain.repositories.task_repository import TaskRepository
from taskmanager.infrastructure.db.models import TaskModel
from taskmanager.infrastructure.mappers.task_mapper import TaskMapper


class SQLAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TaskMapper()

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID."""
        model = self.session.get(TaskModel, task_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_all_by_user_id(self, user_id: int) -> List[Task]:
        """Get the tasks owned by a user, newest first."""
        models = self.session.query(TaskModel).filter(
            TaskModel.user_id == user_id
        ).order_by(TaskModel.created_at.desc(), TaskModel.id.desc()).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def create(self, task: Task) -> Task:
        """Insert a new task."""
        model = self.mapper.domain_to_model(task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def update(self, task: Task) -> Optional[Task]:
        """Write task changes back to its row."""
        model = self.session.get(TaskModel, task.id)
        if not model:
            return None

        self.mapper.update_model(model, task)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def delete(self, task_id: int) -> bool:
        """Delete task by ID. Comments and attachments go with it."""
        model = self.session.get(TaskModel, task_id)

        if not model:
            return False

        self.session.delete(model)
        self.session.commit()
        return True
