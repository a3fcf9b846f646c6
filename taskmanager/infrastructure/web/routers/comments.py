"""
Task comment router.
Comments are listed and posted under their task, edited and deleted by id.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskmanager.application.dto.base_dto import EnvelopeDTO
from taskmanager.application.dto.task_dto import TaskCommentRequestDTO, TaskCommentResponseDTO
from taskmanager.application.services.task_service import TaskCommentService
from taskmanager.infrastructure.auth import get_current_user_id
from taskmanager.infrastructure.db.database import get_db
from taskmanager.infrastructure.repositories import SQLAlchemyTaskCommentRepository, SQLAlchemyTaskRepository


router = APIRouter()


def get_comment_service(session: Session = Depends(get_db)) -> TaskCommentService:
    """Dependency to get the comment service."""
    return TaskCommentService(SQLAlchemyTaskCommentRepository(session), SQLAlchemyTaskRepository(session))


@router.get("/tasks/{task_id}/comments", response_model=EnvelopeDTO[List[TaskCommentResponseDTO]])
async def list_comments(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskCommentService, Depends(get_comment_service)]
):
    """List comments on a task, oldest first. Task owner only."""
    comments = service.get_task_comments(user_id, task_id)
    return EnvelopeDTO(
        message="Comments retrieved successfully",
        data=[TaskCommentResponseDTO.from_domain(comment) for comment in comments]
    )


@router.post(
    "/tasks/{task_id}/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=EnvelopeDTO[TaskCommentResponseDTO]
)
async def create_comment(
    task_id: int,
    request: TaskCommentRequestDTO,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskCommentService, Depends(get_comment_service)]
):
    """Add a comment to a task. Task owner only."""
    comment = service.create_comment(user_id, task_id, request.content)
    return EnvelopeDTO(message="Comment created successfully", data=TaskCommentResponseDTO.from_domain(comment))


@router.put("/comments/{comment_id}", response_model=EnvelopeDTO[TaskCommentResponseDTO])
async def update_comment(
    comment_id: int,
    request: TaskCommentRequestDTO,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskCommentService, Depends(get_comment_service)]
):
    """Edit a comment. Author only."""
    comment = service.update_comment(user_id, comment_id, request.content)
    return EnvelopeDTO(message="Comment updated successfully", data=TaskCommentResponseDTO.from_domain(comment))


@router.delete("/comments/{comment_id}", response_model=EnvelopeDTO)
async def delete_comment(
    comment_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskCommentService, Depends(get_comment_service)]
):
    """Delete a comment. Author only."""
    service.delete_comment(user_id, comment_id)
    return EnvelopeDTO(message="Comment deleted successfully")
