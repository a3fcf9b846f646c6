"""
Authorization rules.

Ownership and role checks applied by the application services. The predicates
are pure; the ``ensure_*`` guards raise ``AuthorizationError`` so a service can
apply a rule in one line right after loading the target entity.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Union

from taskmanager.domain.models.base import AuthorizationError
from taskmanager.domain.models.project import Project
from taskmanager.domain.models.task import Task, TaskAttachment, TaskComment
from taskmanager.domain.models.user import User, UserRole

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Actions gated by role rather than ownership."""
    MANAGE_OWN_TASKS = "manage_own_tasks"
    MANAGE_PROJECTS = "manage_projects"
    MANAGE_ANY_PROJECT = "manage_any_project"


ROLE_CAPABILITIES: Dict[UserRole, FrozenSet[Capability]] = {
    UserRole.COLABORADOR: frozenset({
        Capability.MANAGE_OWN_TASKS,
    }),
    UserRole.GESTOR: frozenset({
        Capability.MANAGE_OWN_TASKS,
        Capability.MANAGE_PROJECTS,
    }),
    UserRole.ADMIN: frozenset({
        Capability.MANAGE_OWN_TASKS,
        Capability.MANAGE_PROJECTS,
        Capability.MANAGE_ANY_PROJECT,
    }),
}


def has_capability(role: Union[UserRole, str], capability: Capability) -> bool:
    """Look up ``capability`` in the role table. Unknown roles grant nothing."""
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return capability in ROLE_CAPABILITIES.get(role, frozenset())


def _role_of(user: Union[User, UserRole, str]) -> Union[UserRole, str]:
    return user.role if isinstance(user, User) else user


# Predicates

def is_owned_by(resource: Union[Task, TaskAttachment], user_id: int) -> bool:
    """True iff ``resource.user_id == user_id``."""
    return resource.user_id == user_id


def is_authored_by(comment: TaskComment, user_id: int) -> bool:
    """True iff ``comment.user_id == user_id``."""
    return comment.user_id == user_id


def can_manage_projects(user: Union[User, UserRole, str]) -> bool:
    """True iff the role is gestor or admin."""
    return has_capability(_role_of(user), Capability.MANAGE_PROJECTS)


def can_manage_project(user_id: int, role: Union[UserRole, str], project: Project) -> bool:
    """Admins manage every project; a gestor manages the projects they created."""
    if has_capability(role, Capability.MANAGE_ANY_PROJECT):
        return True
    return has_capability(role, Capability.MANAGE_PROJECTS) and project.gestor_id == user_id


# Guards

def ensure_task_owner(task: Task, user_id: int, message: str = "You are not authorized to access this task") -> None:
    if not is_owned_by(task, user_id):
        logger.warning(f"User {user_id} denied access to task {task.id}")
        raise AuthorizationError(message)


def ensure_attachment_owner(
    attachment: TaskAttachment,
    user_id: int,
    message: str = "You are not authorized to access this attachment"
) -> None:
    if not is_owned_by(attachment, user_id):
        logger.warning(f"User {user_id} denied access to attachment {attachment.id}")
        raise AuthorizationError(message)


def ensure_comment_author(comment: TaskComment, user_id: int, message: str = "You can only modify your own comments") -> None:
    if not is_authored_by(comment, user_id):
        logger.warning(f"User {user_id} denied access to comment {comment.id}")
        raise AuthorizationError(message)


def ensure_can_manage_projects(user_id: int, role: Union[UserRole, str]) -> None:
    if not can_manage_projects(role):
        logger.warning(f"User {user_id} with role {role} denied project management")
        raise AuthorizationError("Only gestor or admin users can manage projects")


def ensure_project_manager(project: Project, user_id: int, role: Union[UserRole, str]) -> None:
    if not can_manage_project(user_id, role, project):
        logger.warning(f"User {user_id} denied access to project {project.id}")
        raise AuthorizationError("You are not authorized to manage this project")
