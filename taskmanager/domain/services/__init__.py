"""
Domain services.
Business rules that do not belong to a single entity.
"""

from .authorization import (
    Capability,
    ROLE_CAPABILITIES,
    has_capability,
    is_owned_by,
    is_authored_by,
    can_manage_projects,
    can_manage_project,
    ensure_task_owner,
    ensure_attachment_owner,
    ensure_comment_author,
    ensure_can_manage_projects,
    ensure_project_manager,
)

__all__ = [
    "Capability",
    "ROLE_CAPABILITIES",
    "has_capability",
    "is_owned_by",
    "is_authored_by",
    "can_manage_projects",
    "can_manage_project",
    "ensure_task_owner",
    "ensure_attachment_owner",
    "ensure_comment_author",
    "ensure_can_manage_projects",
    "ensure_project_manager",
]
