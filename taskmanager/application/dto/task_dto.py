"""
Task DTOs for the application layer.
Data Transfer Objects for tasks, comments and attachments.
"""

from typing import Optional
from datetime import datetime

from pydantic import Field

from taskmanager.domain.models.task import (
    Task, TaskComment, TaskAttachment, TaskStatus, TaskPriority,
    MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH, MAX_COMMENT_LENGTH
)
from .base_dto import RequestDTO, ResponseDTO


# Request DTOs
class CreateTaskRequestDTO(RequestDTO):
    """DTO for task creation requests. The owner is always the caller."""

    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH, description="Task title")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Task description")
    priority: Optional[TaskPriority] = Field(default=None, description="Task priority (low, medium, high)")
    due_date: Optional[datetime] = Field(default=None, description="Task due date")


class UpdateTaskRequestDTO(RequestDTO):
    """DTO for task update requests. Omitted fields are left unchanged; null clears description, priority and due date."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH, description="Task title")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Task description")
    status: Optional[TaskStatus] = Field(default=None, description="Task status (pending, completed)")
    priority: Optional[TaskPriority] = Field(default=None, description="Task priority")
    due_date: Optional[datetime] = Field(default=None, description="Task due date")


class TaskCommentRequestDTO(RequestDTO):
    """DTO for creating or editing a comment."""

    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH, description="Comment content")


# Response DTOs
class TaskResponseDTO(ResponseDTO):
    """DTO for task responses."""

    user_id: int = Field(description="Owner user ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    status: TaskStatus = Field(description="Task status")
    priority: Optional[TaskPriority] = Field(default=None, description="Task priority")
    due_date: Optional[datetime] = Field(default=None, description="Task due date")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at
        )


class TaskCommentResponseDTO(ResponseDTO):
    """DTO for task comment in responses."""

    task_id: int = Field(description="Parent task ID")
    user_id: int = Field(description="Comment author user ID")
    content: str = Field(description="Comment content")

    @classmethod
    def from_domain(cls, comment: TaskComment) -> "TaskCommentResponseDTO":
        return cls(
            id=comment.id,
            task_id=comment.task_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at
        )


class TaskAttachmentResponseDTO(ResponseDTO):
    """DTO for task attachment in responses. The storage path is not exposed."""

    task_id: int = Field(description="Parent task ID")
    user_id: int = Field(description="User ID who uploaded the file")
    filename: str = Field(description="Original filename")
    filesize: int = Field(description="File size in bytes")
    mimetype: str = Field(description="MIME type")

    @classmethod
    def from_domain(cls, attachment: TaskAttachment) -> "TaskAttachmentResponseDTO":
        return cls(
            id=attachment.id,
            task_id=attachment.task_id,
            user_id=attachment.user_id,
            filename=attachment.filename,
            filesize=attachment.filesize,
            mimetype=attachment.mimetype,
            created_at=attachment.created_at
        )
