"""
Task mapper for converting between domain entities and database models.
"""

from taskmanager.domain.models.task import Task, TaskStatus, TaskPriority
from taskmanager.infrastructure.db.models import TaskModel


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to TaskModel."""
        return TaskModel(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value if task.priority else None,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at
        )

    def update_model(self, model: TaskModel, task: Task) -> TaskModel:
        """Copy mutable task fields onto an existing row. Ownership is never rewritten."""
        model.title = task.title
        model.description = task.description
        model.status = task.status.value
        model.priority = task.priority.value if task.priority else None
        model.due_date = task.due_date
        model.updated_at = task.updated_at
        return model

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity."""
        return Task(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status) if model.status else TaskStatus.PENDING,
            priority=TaskPriority(model.priority) if model.priority else None,
            due_date=model.due_date,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
