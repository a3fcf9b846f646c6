"""
Project repository interface.
Defines the contract for project data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskmanager.domain.models.project import Project


class ProjectRepository(ABC):
    """Repository interface for Project entity."""

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[Project]:
        """
        Find a project by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Project]:
        """
        Find every project, newest first.
        """
        pass

    @abstractmethod
    def find_by_gestor_id(self, gestor_id: int) -> List[Project]:
        """
        Find the projects managed by a gestor, newest first.
        """
        pass

    @abstractmethod
    def create(self, project: Project) -> Project:
        pass

    @abstractmethod
    def update(self, project: Project) -> Optional[Project]:
        pass

    @abstractmethod
    def delete(self, project_id: int) -> bool:
        pass
