"""
Project repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy.orm import Session

from taskmanager.domain.models.project import Project
from taskmanager.domain.repositories.project_repository import ProjectRepository
from taskmanager.infrastructure.db.models import ProjectModel
from taskmanager.infrastructure.mappers.project_mapper import ProjectMapper


class SQLAlchemyProjectRepository(ProjectRepository):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ProjectMapper()

    def find_by_id(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        model = self.session.get(ProjectModel, project_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_all(self) -> List[Project]:
        """Get every project, newest first."""
        models = self.session.query(ProjectModel).order_by(
            ProjectModel.created_at.desc(), ProjectModel.id.desc()
        ).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def find_by_gestor_id(self, gestor_id: int) -> List[Project]:
        """Get the projects managed by a gestor, newest first."""
        models = self.session.query(ProjectModel).filter(
            ProjectModel.gestor_id == gestor_id
        ).order_by(ProjectModel.created_at.desc(), ProjectModel.id.desc()).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def create(self, project: Project) -> Project:
        model = self.mapper.domain_to_model(project)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def update(self, project: Project) -> Optional[Project]:
        model = self.session.get(ProjectModel, project.id)
        if not model:
            return None

        self.mapper.update_model(model, project)
        self.session.commit()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def delete(self, project_id: int) -> bool:
        model = self.session.get(ProjectModel, project_id)

        if not model:
            return False

        self.session.delete(model)
        self.session.commit()
        return True
