"""
Task attachment repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy.orm import Session

from taskmanager.domain.models.task import TaskAttachment
from taskmanager.domain.repositories.task_repository import TaskAttachmentRepository
from taskmanager.infrastructure.db.models import TaskAttachmentModel
from taskmanager.infrastructure.mappers.task_attachment_mapper import TaskAttachmentMapper


class SQLAlchemyTaskAttachmentRepository(TaskAttachmentRepository):
    """SQLAlchemy implementation of task attachment repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TaskAttachmentMapper()

    def find_by_id(self, attachment_id: int) -> Optional[TaskAttachment]:
        model = self.session.get(TaskAttachmentModel, attachment_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_by_task_id(self, task_id: int) -> List[TaskAttachment]:
        """Get the attachments of a task, newest first."""
        models = self.session.query(TaskAttachmentModel).filter(
            TaskAttachmentModel.task_id == task_id
        ).order_by(TaskAttachmentModel.created_at.desc(), TaskAttachmentModel.id.desc()).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def create(self, attachment: TaskAttachment) -> TaskAttachment:
        model = self.mapper.domain_to_model(attachment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def delete(self, attachment_id: int) -> bool:
        model = self.session.get(TaskAttachmentModel, attachment_id)

        if not model:
            return False

        self.session.delete(model)
        self.session.commit()
        return True
