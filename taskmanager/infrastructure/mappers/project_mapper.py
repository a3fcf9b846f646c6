"""
Project mapper for converting between domain entities and database models.
"""

from taskmanager.domain.models.project import Project
from taskmanager.infrastructure.db.models import ProjectModel


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        """Convert Project domain entity to ProjectModel."""
        return ProjectModel(
            id=project.id,
            gestor_id=project.gestor_id,
            title=project.title,
            description=project.description,
            deadline=project.deadline,
            created_at=project.created_at,
            updated_at=project.updated_at
        )

    def update_model(self, model: ProjectModel, project: Project) -> ProjectModel:
        """Copy mutable project fields onto an existing row."""
        model.title = project.title
        model.description = project.description
        model.deadline = project.deadline
        model.updated_at = project.updated_at
        return model

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity."""
        return Project(
            id=model.id,
            gestor_id=model.gestor_id,
            title=model.title,
            description=model.description,
            deadline=model.deadline,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
