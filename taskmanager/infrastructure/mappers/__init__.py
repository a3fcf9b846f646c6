"""
Mappers module.
Convert between domain entities and SQLAlchemy rows.
"""

from .user_mapper import UserMapper
from .task_mapper import TaskMapper
from .task_comment_mapper import TaskCommentMapper
from .task_attachment_mapper import TaskAttachmentMapper
from .project_mapper import ProjectMapper

__all__ = [
    "UserMapper",
    "TaskMapper",
    "TaskCommentMapper",
    "TaskAttachmentMapper",
    "ProjectMapper",
]
