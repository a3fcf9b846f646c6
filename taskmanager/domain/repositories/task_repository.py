"""
Task repository interfaces.
Define the contracts for task, comment and attachment persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskmanager.domain.models.task import Task, TaskComment, TaskAttachment


class TaskRepository(ABC):
    """
    Repository interface for Task entity.
    Listings are ordered newest first.
    """

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[Task]:
        """
        Find a task by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def find_all_by_user_id(self, user_id: int) -> List[Task]:
        """
        Find all tasks owned by a user, newest first.
        """
        pass

    @abstractmethod
    def create(self, task: Task) -> Task:
        """
        Persist a new task and return it with its ID assigned.
        """
        pass

    @abstractmethod
    def update(self, task: Task) -> Optional[Task]:
        """
        Persist changes to an existing task.
        Returns None if the row no longer exists.
        """
        pass

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """
        Delete a task and, through cascades, its comments and attachments.
        Returns False if not found.
        """
        pass


class TaskCommentRepository(ABC):
    """Repository interface for TaskComment entity. Listings are oldest first."""

    @abstractmethod
    def find_by_id(self, comment_id: int) -> Optional[TaskComment]:
        pass

    @abstractmethod
    def find_by_task_id(self, task_id: int) -> List[TaskComment]:
        pass

    @abstractmethod
    def create(self, comment: TaskComment) -> TaskComment:
        pass

    @abstractmethod
    def update(self, comment: TaskComment) -> Optional[TaskComment]:
        pass

    @abstractmethod
    def delete(self, comment_id: int) -> bool:
        pass


class TaskAttachmentRepository(ABC):
    """Repository interface for TaskAttachment entity. Listings are newest first."""

    @abstractmethod
    def find_by_id(self, attachment_id: int) -> Optional[TaskAttachment]:
        pass

    @abstractmethod
    def find_by_task_id(self, task_id: int) -> List[TaskAttachment]:
        pass

    @abstractmethod
    def create(self, attachment: TaskAttachment) -> TaskAttachment:
        pass

    @abstractmethod
    def delete(self, attachment_id: int) -> bool:
        pass
