"""
Task attachment mapper for converting between domain entities and database models.
"""

from taskmanager.domain.models.task import TaskAttachment
from taskmanager.infrastructure.db.models import TaskAttachmentModel


class TaskAttachmentMapper:
    """Maps between TaskAttachment domain entity and TaskAttachmentModel database model."""

    def domain_to_model(self, attachment: TaskAttachment) -> TaskAttachmentModel:
        return TaskAttachmentModel(
            id=attachment.id,
            task_id=attachment.task_id,
            user_id=attachment.user_id,
            filename=attachment.filename,
            filepath=attachment.filepath,
            filesize=attachment.filesize,
            mimetype=attachment.mimetype,
            created_at=attachment.created_at
        )

    def model_to_domain(self, model: TaskAttachmentModel) -> TaskAttachment:
        # Attachments have no updated_at column; they are never modified
        return TaskAttachment(
            id=model.id,
            task_id=model.task_id,
            user_id=model.user_id,
            filename=model.filename,
            filepath=model.filepath,
            filesize=model.filesize,
            mimetype=model.mimetype,
            created_at=model.created_at,
            updated_at=model.created_at
        )
