"""
Project DTOs for the application layer.
"""

from typing import Optional
from datetime import datetime

from pydantic import Field

from taskmanager.domain.models.project import Project
from taskmanager.domain.models.task import MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH
from .base_dto import RequestDTO, ResponseDTO


class CreateProjectRequestDTO(RequestDTO):
    """DTO for project creation requests. The caller becomes the project gestor."""

    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH, description="Project title")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Project description")
    deadline: datetime = Field(description="Project deadline")


class UpdateProjectRequestDTO(RequestDTO):
    """DTO for project update requests. Omitted fields are left unchanged; null clears the description."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH, description="Project title")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Project description")
    deadline: Optional[datetime] = Field(default=None, description="Project deadline")


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    gestor_id: int = Field(description="Managing user ID")
    title: str = Field(description="Project title")
    description: Optional[str] = Field(default=None, description="Project description")
    deadline: datetime = Field(description="Project deadline")

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            gestor_id=project.gestor_id,
            title=project.title,
            description=project.description,
            deadline=project.deadline,
            created_at=project.created_at,
            updated_at=project.updated_at
        )
