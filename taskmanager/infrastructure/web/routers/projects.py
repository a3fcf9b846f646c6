"""
Project management router.
Available to gestor and admin users.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskmanager.application.dto.base_dto import EnvelopeDTO
from taskmanager.application.dto.project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    ProjectResponseDTO
)
from taskmanager.application.services.project_service import ProjectService
from taskmanager.infrastructure.auth import CurrentUser, get_current_user
from taskmanager.infrastructure.db.database import get_db
from taskmanager.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository


router = APIRouter()


def get_project_service(session: Session = Depends(get_db)) -> ProjectService:
    """Dependency to get the project service."""
    return ProjectService(SQLAlchemyProjectRepository(session))


@router.get("", response_model=EnvelopeDTO[List[ProjectResponseDTO]])
async def list_projects(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)]
):
    """List managed projects. Admins see every project."""
    projects = service.get_projects(current_user)
    return EnvelopeDTO(
        message="Projects retrieved successfully",
        data=[ProjectResponseDTO.from_domain(project) for project in projects]
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EnvelopeDTO[ProjectResponseDTO])
async def create_project(
    request: CreateProjectRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)]
):
    """
    Create a project managed by the caller. Gestor or admin only.

    - **title**: Project title (required)
    - **description**: Project description
    - **deadline**: Project deadline (required)
    """
    project = service.create_project(current_user, request)
    return EnvelopeDTO(message="Project created successfully", data=ProjectResponseDTO.from_domain(project))


@router.get("/{project_id}", response_model=EnvelopeDTO[ProjectResponseDTO])
async def get_project(
    project_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)]
):
    project = service.get_project(current_user, project_id)
    return EnvelopeDTO(message="Project retrieved successfully", data=ProjectResponseDTO.from_domain(project))


@router.put("/{project_id}", response_model=EnvelopeDTO[ProjectResponseDTO])
async def update_project(
    project_id: int,
    request: UpdateProjectRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)]
):
    """Update a project. Managing gestor or admin only."""
    project = service.update_project(current_user, project_id, request)
    return EnvelopeDTO(message="Project updated successfully", data=ProjectResponseDTO.from_domain(project))


@router.delete("/{project_id}", response_model=EnvelopeDTO)
async def delete_project(
    project_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ProjectService, Depends(get_project_service)]
):
    """Delete a project. Managing gestor or admin only."""
    service.delete_project(current_user, project_id)
    return EnvelopeDTO(message="Project deleted successfully")
