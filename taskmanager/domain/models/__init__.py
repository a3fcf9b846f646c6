"""
Domain models for the task manager.
This module exports all domain entities and exceptions.
"""

from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthorizationError,
    AuthenticationError,
)
from .user import User, UserRole
from .task import Task, TaskStatus, TaskPriority, TaskComment, TaskAttachment
from .project import Project

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "AuthorizationError",
    "AuthenticationError",
    "User",
    "UserRole",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "TaskComment",
    "TaskAttachment",
    "Project",
]
