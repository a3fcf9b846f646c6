"""
Task comment mapper for converting between domain entities and database models.
"""

from taskmanager.domain.models.task import TaskComment
from taskmanager.infrastructure.db.models import TaskCommentModel


class TaskCommentMapper:
    """Maps between TaskComment domain entity and TaskCommentModel database model."""

    def domain_to_model(self, comment: TaskComment) -> TaskCommentModel:
        return TaskCommentModel(
            id=comment.id,
            task_id=comment.task_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at
        )

    def update_model(self, model: TaskCommentModel, comment: TaskComment) -> TaskCommentModel:
        model.content = comment.content
        model.updated_at = comment.updated_at
        return model

    def model_to_domain(self, model: TaskCommentModel) -> TaskComment:
        return TaskComment(
            id=model.id,
            task_id=model.task_id,
            user_id=model.user_id,
            content=model.content,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
