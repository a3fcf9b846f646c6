"""
Repository interfaces for the domain layer.
Services depend on these ports; infrastructure provides the implementations.
"""

from .task_repository import TaskRepository, TaskCommentRepository, TaskAttachmentRepository
from .project_repository import ProjectRepository
from .user_repository import UserRepository

__all__ = [
    "TaskRepository",
    "TaskCommentRepository",
    "TaskAttachmentRepository",
    "ProjectRepository",
    "UserRepository",
]
