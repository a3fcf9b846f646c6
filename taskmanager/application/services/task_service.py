"""
Task services for the application layer.
Owner-scoped operations on tasks, their comments and their attachments.
"""

import logging
from typing import List, Optional, Tuple
from pathlib import Path

from taskmanager.application.dto.task_dto import CreateTaskRequestDTO, UpdateTaskRequestDTO
from taskmanager.domain.models.base import EntityNotFoundError
from taskmanager.domain.models.task import Task, TaskComment, TaskAttachment
from taskmanager.domain.repositories.task_repository import (
    TaskRepository, TaskCommentRepository, TaskAttachmentRepository
)
from taskmanager.domain.services.authorization import (
    ensure_task_owner, ensure_attachment_owner, ensure_comment_author
)
from taskmanager.infrastructure.storage.storage_service import StorageService

logger = logging.getLogger(__name__)


class TaskService:
    """Task CRUD. Every read and write is restricted to the task owner."""

    def __init__(
        self,
        task_repository: TaskRepository,
        attachment_repository: Optional[TaskAttachmentRepository] = None,
        storage: Optional[StorageService] = None
    ):
        self.task_repository = task_repository
        self.attachment_repository = attachment_repository
        self.storage = storage

    def get_tasks(self, user_id: int) -> List[Task]:
        """List the caller's tasks, newest first."""
        return self.task_repository.find_all_by_user_id(user_id)

    def get_task(self, user_id: int, task_id: int) -> Task:
        task = self._get_task_or_raise(task_id)
        ensure_task_owner(task, user_id)
        return task

    def create_task(self, user_id: int, data: CreateTaskRequestDTO) -> Task:
        """Create a task owned by the caller. Any role may do this."""
        task = Task(
            user_id=user_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            due_date=data.due_date
        )
        created = self.task_repository.create(task)
        logger.info(f"Task {created.id} created by user {user_id}")
        return created

    def update_task(self, user_id: int, task_id: int, data: UpdateTaskRequestDTO) -> Task:
        task = self._get_task_or_raise(task_id)
        ensure_task_owner(task, user_id, "You can only update your own tasks")

        task.update_info(**data.model_dump(exclude_unset=True))
        return self._save(task)

    def complete_task(self, user_id: int, task_id: int) -> Task:
        task = self._get_task_or_raise(task_id)
        ensure_task_owner(task, user_id, "You can only complete your own tasks")

        task.complete()
        return self._save(task)

    def delete_task(self, user_id: int, task_id: int) -> None:
        """
        Delete a task.

        Comment and attachment rows go with it through the foreign key cascade;
        the attachment files are removed from storage afterwards.
        """
        task = self._get_task_or_raise(task_id)
        ensure_task_owner(task, user_id, "You can only delete your own tasks")

        attachments: List[TaskAttachment] = []
        if self.attachment_repository is not None:
            attachments = self.attachment_repository.find_by_task_id(task_id)

        if not self.task_repository.delete(task_id):
            raise EntityNotFoundError("Task", task_id)

        if self.storage is not None:
            for attachment in attachments:
                self.storage.delete(attachment.filepath)

        logger.info(f"Task {task_id} deleted by user {user_id} ({len(attachments)} attachments removed)")

    def _get_task_or_raise(self, task_id: int) -> Task:
        task = self.task_repository.find_by_id(task_id)
        if not task:
            raise EntityNotFoundError("Task", task_id)
        return task

    def _save(self, task: Task) -> Task:
        updated = self.task_repository.update(task)
        if not updated:
            raise EntityNotFoundError("Task", task.id)
        return updated


class TaskCommentService:
    """Comments on tasks. Reading and posting need task ownership; edits need authorship."""

    def __init__(self, comment_repository: TaskCommentRepository, task_repository: TaskRepository):
        self.comment_repository = comment_repository
        self.task_repository = task_repository

    def get_task_comments(self, user_id: int, task_id: int) -> List[TaskComment]:
        """List comments on an owned task, oldest first."""
        self._get_owned_task(user_id, task_id)
        return self.comment_repository.find_by_task_id(task_id)

    def create_comment(self, user_id: int, task_id: int, content: str) -> TaskComment:
        self._get_owned_task(user_id, task_id)

        comment = TaskComment(task_id=task_id, user_id=user_id, content=content)
        created = self.comment_repository.create(comment)
        logger.info(f"Comment {created.id} added to task {task_id} by user {user_id}")
        return created

    def update_comment(self, user_id: int, comment_id: int, content: str) -> TaskComment:
        comment = self._get_comment_or_raise(comment_id)
        ensure_comment_author(comment, user_id, "You can only edit your own comments")

        comment.edit(content)
        updated = self.comment_repository.update(comment)
        if not updated:
            raise EntityNotFoundError("Comment", comment_id)
        return updated

    def delete_comment(self, user_id: int, comment_id: int) -> None:
        comment = self._get_comment_or_raise(comment_id)
        ensure_comment_author(comment, user_id, "You can only delete your own comments")

        if not self.comment_repository.delete(comment_id):
            raise EntityNotFoundError("Comment", comment_id)
        logger.info(f"Comment {comment_id} deleted by user {user_id}")

    def _get_owned_task(self, user_id: int, task_id: int) -> Task:
        task = self.task_repository.find_by_id(task_id)
        if not task:
            raise EntityNotFoundError("Task", task_id)
        ensure_task_owner(task, user_id)
        return task

    def _get_comment_or_raise(self, comment_id: int) -> TaskComment:
        comment = self.comment_repository.find_by_id(comment_id)
        if not comment:
            raise EntityNotFoundError("Comment", comment_id)
        return comment


class TaskAttachmentService:
    """Files attached to tasks, stored on local disk."""

    def __init__(
        self,
        attachment_repository: TaskAttachmentRepository,
        task_repository: TaskRepository,
        storage: StorageService
    ):
        self.attachment_repository = attachment_repository
        self.task_repository = task_repository
        self.storage = storage

    def get_attachments(self, user_id: int, task_id: int) -> List[TaskAttachment]:
        self._get_owned_task(user_id, task_id)
        return self.attachment_repository.find_by_task_id(task_id)

    def upload_attachment(
        self,
        user_id: int,
        task_id: int,
        filename: Optional[str],
        file_content: bytes,
        content_type: Optional[str] = None
    ) -> TaskAttachment:
        """
        Store an uploaded file and record it against an owned task.

        Raises:
            EntityNotFoundError: If the task does not exist
            AuthorizationError: If the caller does not own the task
            ValidationError: If the file is empty, too large or of a disallowed type
        """
        self._get_owned_task(user_id, task_id)

        stored = self.storage.save(file_content, filename, content_type, folder=str(task_id))

        attachment = TaskAttachment(
            task_id=task_id,
            user_id=user_id,
            filename=stored.filename,
            filepath=stored.filepath,
            filesize=stored.filesize,
            mimetype=stored.mimetype
        )
        try:
            created = self.attachment_repository.create(attachment)
        except Exception:
            # Leave no orphan file behind when the row cannot be written
            self.storage.delete(stored.filepath)
            raise

        logger.info(f"Attachment {created.id} uploaded to task {task_id} by user {user_id}")
        return created

    def get_attachment_for_download(self, user_id: int, attachment_id: int) -> Tuple[TaskAttachment, Path]:
        """Return the attachment record and the absolute path of its file."""
        attachment = self._get_attachment_or_raise(attachment_id)
        ensure_attachment_owner(attachment, user_id)

        path = self.storage.resolve(attachment.filepath)
        if not path.is_file():
            logger.error(f"File for attachment {attachment_id} missing at {attachment.filepath}")
            raise EntityNotFoundError("File", attachment_id)
        return attachment, path

    def delete_attachment(self, user_id: int, attachment_id: int) -> None:
        attachment = self._get_attachment_or_raise(attachment_id)
        ensure_attachment_owner(attachment, user_id, "You can only delete your own attachments")

        if not self.attachment_repository.delete(attachment_id):
            raise EntityNotFoundError("Attachment", attachment_id)

        self.storage.delete(attachment.filepath)
        logger.info(f"Attachment {attachment_id} deleted by user {user_id}")

    def _get_owned_task(self, user_id: int, task_id: int) -> Task:
        task = self.task_repository.find_by_id(task_id)
        if not task:
            raise EntityNotFoundError("Task", task_id)
        ensure_task_owner(task, user_id)
        return task

    def _get_attachment_or_raise(self, attachment_id: int) -> TaskAttachment:
        attachment = self.attachment_repository.find_by_id(attachment_id)
        if not attachment:
            raise EntityNotFoundError("Attachment", attachment_id)
        return attachment
