"""
Project services for the application layer.
"""

import logging
from typing import List

from taskmanager.application.dto.project_dto import CreateProjectRequestDTO, UpdateProjectRequestDTO
from taskmanager.domain.models.base import EntityNotFoundError
from taskmanager.domain.models.project import Project
from taskmanager.domain.repositories.project_repository import ProjectRepository
from taskmanager.domain.services.authorization import (
    Capability, has_capability, ensure_can_manage_projects, ensure_project_manager
)
from taskmanager.infrastructure.auth.dependencies import CurrentUser

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Project management for gestor and admin users.

    ``user`` is the authenticated caller; only its ``id`` and ``role`` are used.
    """

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def get_projects(self, user: CurrentUser) -> List[Project]:
        """
        Admins see every project, everyone else the ones they manage.
        Colaboradores manage none, so their list is empty.
        """
        if has_capability(user.role, Capability.MANAGE_ANY_PROJECT):
            return self.project_repository.find_all()
        return self.project_repository.find_by_gestor_id(user.id)

    def get_project(self, user: CurrentUser, project_id: int) -> Project:
        project = self._get_project_or_raise(project_id)
        ensure_project_manager(project, user.id, user.role)
        return project

    def create_project(self, user: CurrentUser, data: CreateProjectRequestDTO) -> Project:
        ensure_can_manage_projects(user.id, user.role)

        project = Project(
            gestor_id=user.id,
            title=data.title,
            description=data.description,
            deadline=data.deadline
        )
        created = self.project_repository.create(project)
        logger.info(f"Project {created.id} created by user {user.id}")
        return created

    def update_project(self, user: CurrentUser, project_id: int, data: UpdateProjectRequestDTO) -> Project:
        project = self._get_project_or_raise(project_id)
        ensure_project_manager(project, user.id, user.role)

        # only the fields present in the request; an explicit null clears the description
        project.update_info(**data.model_dump(exclude_unset=True))
        updated = self.project_repository.update(project)
        if not updated:
            raise EntityNotFoundError("Project", project_id)
        return updated

    def delete_project(self, user: CurrentUser, project_id: int) -> None:
        project = self._get_project_or_raise(project_id)
        ensure_project_manager(project, user.id, user.role)

        if not self.project_repository.delete(project_id):
            raise EntityNotFoundError("Project", project_id)
        logger.info(f"Project {project_id} deleted by user {user.id}")

    def _get_project_or_raise(self, project_id: int) -> Project:
        project = self.project_repository.find_by_id(project_id)
        if not project:
            raise EntityNotFoundError("Project", project_id)
        return project
