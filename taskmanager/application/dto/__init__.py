"""
Data Transfer Objects.
Request validation and response shaping for the HTTP layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, EnvelopeDTO
from .task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskRequestDTO,
    TaskCommentRequestDTO,
    TaskResponseDTO,
    TaskCommentResponseDTO,
    TaskAttachmentResponseDTO,
)
from .project_dto import CreateProjectRequestDTO, UpdateProjectRequestDTO, ProjectResponseDTO
from .user_dto import RegisterRequestDTO, LoginRequestDTO, UserResponseDTO, AuthResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "EnvelopeDTO",
    "CreateTaskRequestDTO",
    "UpdateTaskRequestDTO",
    "TaskCommentRequestDTO",
    "TaskResponseDTO",
    "TaskCommentResponseDTO",
    "TaskAttachmentResponseDTO",
    "CreateProjectRequestDTO",
    "UpdateProjectRequestDTO",
    "ProjectResponseDTO",
    "RegisterRequestDTO",
    "LoginRequestDTO",
    "UserResponseDTO",
    "AuthResponseDTO",
]
