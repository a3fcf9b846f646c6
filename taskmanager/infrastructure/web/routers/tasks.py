"""
Task management router.
Handles CRUD operations for the caller's own tasks.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskmanager.application.dto.base_dto import EnvelopeDTO
from taskmanager.application.dto.task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskRequestDTO,
    TaskResponseDTO
)
from taskmanager.application.services.task_service import TaskService
from taskmanager.infrastructure.auth import get_current_user_id
from taskmanager.infrastructure.db.database import get_db
from taskmanager.infrastructure.repositories import SQLAlchemyTaskAttachmentRepository, SQLAlchemyTaskRepository
from taskmanager.infrastructure.storage import StorageService, get_storage_service


router = APIRouter()


def get_task_service(
    session: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage_service)
) -> TaskService:
    """Dependency to get the task service for this request."""
    return TaskService(
        SQLAlchemyTaskRepository(session),
        SQLAlchemyTaskAttachmentRepository(session),
        storage
    )


@router.get("", response_model=EnvelopeDTO[List[TaskResponseDTO]])
async def list_tasks(
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskService, Depends(get_task_service)]
):
    """List the caller's tasks, newest first."""
    tasks = service.get_tasks(user_id)
    return EnvelopeDTO(
        message="Tasks retrieved successfully",
        data=[TaskResponseDTO.from_domain(task) for task in tasks]
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EnvelopeDTO[TaskResponseDTO])
async def create_task(
    request: CreateTaskRequestDTO,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskService, Depends(get_task_service)]
):
    """
    Create a new task owned by the caller.

    - **title**: Task title (required)
    - **description**: Task description
    - **priority**: Task priority (low, medium, high)
    - **due_date**: Due date for the task
    """
    task = service.create_task(user_id, request)
    return EnvelopeDTO(message="Task created successfully", data=TaskResponseDTO.from_domain(task))


@router.get("/{task_id}", response_model=EnvelopeDTO[TaskResponseDTO])
async def get_task(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskService, Depends(get_task_service)]
):
    """Get a single task. Owner only."""
    task = service.get_task(user_id, task_id)
    return EnvelopeDTO(message="Task retrieved successfully", data=TaskResponseDTO.from_domain(task))


@router.put("/{task_id}", response_model=EnvelopeDTO[TaskResponseDTO])
async def update_task(
    task_id: int,
    request: UpdateTaskRequestDTO,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskService, Depends(get_task_service)]
):
    """
    Update a task. Owner only; omitted fields are left unchanged.

    - **title**, **description**, **status**, **priority**, **due_date**
    """
    task = service.update_task(user_id, task_id, request)
    return EnvelopeDTO(message="Task updated successfully", data=TaskResponseDTO.from_domain(task))


@router.patch("/{task_id}/complete", response_model=EnvelopeDTO[TaskResponseDTO])
async def complete_task(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskService, Depends(get_task_service)]
):
    """Mark a task as completed. Owner only."""
    task = service.complete_task(user_id, task_id)
    return EnvelopeDTO(message="Task completed successfully", data=TaskResponseDTO.from_domain(task))


@router.delete("/{task_id}", response_model=EnvelopeDTO)
async def delete_task(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskService, Depends(get_task_service)]
):
    """Delete a task together with its comments and attachments. Owner only."""
    service.delete_task(user_id, task_id)
    return EnvelopeDTO(message="Task deleted successfully")
