"""
Project domain model.
Projects are managed by a gestor; admins may manage any project.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from taskmanager.domain.models.base import BaseEntity, ValidationError
from taskmanager.domain.models.task import MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH

PROJECT_UPDATABLE_FIELDS = ("title", "description", "deadline")


@dataclass(eq=False)
class Project(BaseEntity):
    """
    Project entity.
    ``gestor_id`` is the managing user who created the project.
    """

    gestor_id: int
    title: str
    deadline: datetime
    description: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate project state."""
        if not self.gestor_id:
            raise ValidationError("Project manager is required", "gestor_id")

        if not self.title or not self.title.strip():
            raise ValidationError("Project title is required", "title")

        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(f"Project title too long (max {MAX_TITLE_LENGTH} characters)", "title")

        if self.description and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters)", "description"
            )

        if self.deadline is None:
            raise ValidationError("Deadline is required", "deadline")

    def update_info(self, **changes: Any) -> None:
        """
        Update project information.

        Only the given fields change. ``description=None`` clears the
        description; title and deadline cannot be cleared.
        """
        self._apply_changes(changes, PROJECT_UPDATABLE_FIELDS)
