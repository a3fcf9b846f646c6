"""
Task domain models.
A task belongs to exactly one user; comments and attachments hang off a task.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from enum import Enum

from taskmanager.domain.models.base import BaseEntity, ValidationError

MAX_TITLE_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 5000
MAX_COMMENT_LENGTH = 5000

TASK_UPDATABLE_FIELDS = ("title", "description", "status", "priority", "due_date")


class TaskStatus(str, Enum):
    """Task status."""
    PENDING = "pending"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(eq=False)
class Task(BaseEntity):
    """
    Task entity.
    Owned exclusively by the user who created it (``user_id``).
    """

    user_id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None

    def __post_init__(self):
        """Initialize task after creation."""
        super().__post_init__()
        if not isinstance(self.status, TaskStatus):
            self.status = TaskStatus(self.status)
        if self.priority is not None and not isinstance(self.priority, TaskPriority):
            self.priority = TaskPriority(self.priority)
        self.validate()

    def validate(self) -> None:
        """Validate task state."""
        if not self.user_id:
            raise ValidationError("Task owner is required", "user_id")

        if not self.title or not self.title.strip():
            raise ValidationError("Task title is required", "title")

        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(f"Task title too long (max {MAX_TITLE_LENGTH} characters)", "title")

        if self.description and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters)", "description"
            )

    @property
    def is_completed(self) -> bool:
        """Check if task is completed."""
        return self.status == TaskStatus.COMPLETED

    def complete(self) -> None:
        """Mark the task as completed. Completing twice is a no-op."""
        self.status = TaskStatus.COMPLETED
        self.mark_as_updated()

    def update_info(self, **changes: Any) -> None:
        """
        Update task information.

        Only the given fields change. ``description``, ``priority`` and
        ``due_date`` given as ``None`` are cleared; title and status are required.
        """
        if "status" in changes:
            if changes["status"] is None:
                raise ValidationError("Task status is required", "status")
            changes["status"] = TaskStatus(changes["status"])

        if changes.get("priority") is not None:
            changes["priority"] = TaskPriority(changes["priority"])

        self._apply_changes(changes, TASK_UPDATABLE_FIELDS)


@dataclass(eq=False)
class TaskComment(BaseEntity):
    """Comment written by ``user_id`` on task ``task_id``."""

    task_id: int
    user_id: int
    content: str

    def __post_init__(self):
        super().__post_init__()
        self.content = (self.content or "").strip()
        self.validate()

    def validate(self) -> None:
        if not self.content:
            raise ValidationError("Comment content cannot be empty", "content")

        if len(self.content) > MAX_COMMENT_LENGTH:
            raise ValidationError(f"Comment too long (max {MAX_COMMENT_LENGTH} characters)", "content")

    def edit(self, content: str) -> None:
        self.content = (content or "").strip()
        self.validate()
        self.mark_as_updated()


@dataclass(eq=False)
class TaskAttachment(BaseEntity):
    """
    File attached to a task.
    Attachments are immutable: they can only be created and deleted.
    """

    task_id: int
    user_id: int
    filename: str
    filepath: str
    filesize: int
    mimetype: str

    def __post_init__(self):
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        if not self.filename:
            raise ValidationError("Filename is required", "filename")

        if not self.filepath:
            raise ValidationError("File path is required", "filepath")

        if self.filesize < 0:
            raise ValidationError("File size cannot be negative", "filesize")
