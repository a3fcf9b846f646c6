"""
Application services.
Each service receives its repositories through the constructor and raises
domain exceptions; the web layer maps those to HTTP responses.
"""

from .auth_service import AuthService
from .project_service import ProjectService
from .task_service import TaskService, TaskCommentService, TaskAttachmentService

__all__ = [
    "AuthService",
    "ProjectService",
    "TaskService",
    "TaskCommentService",
    "TaskAttachmentService",
]
