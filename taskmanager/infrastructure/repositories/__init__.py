"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository
from .task_repository import SQLAlchemyTaskRepository
from .task_comment_repository import SQLAlchemyTaskCommentRepository
from .task_attachment_repository import SQLAlchemyTaskAttachmentRepository
from .project_repository import SQLAlchemyProjectRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyTaskRepository",
    "SQLAlchemyTaskCommentRepository",
    "SQLAlchemyTaskAttachmentRepository",
    "SQLAlchemyProjectRepository",
]
