"""
Task attachment router.
Multipart uploads under a task; download and delete by attachment id.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from taskmanager.application.dto.base_dto import EnvelopeDTO
from taskmanager.application.dto.task_dto import TaskAttachmentResponseDTO
from taskmanager.application.services.task_service import TaskAttachmentService
from taskmanager.infrastructure.auth import get_current_user_id
from taskmanager.infrastructure.db.database import get_db
from taskmanager.infrastructure.repositories import SQLAlchemyTaskAttachmentRepository, SQLAlchemyTaskRepository
from taskmanager.infrastructure.storage import StorageService, get_storage_service


router = APIRouter()


def get_attachment_service(
    session: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage_service)
) -> TaskAttachmentService:
    """Dependency to get the attachment service."""
    return TaskAttachmentService(
        SQLAlchemyTaskAttachmentRepository(session),
        SQLAlchemyTaskRepository(session),
        storage
    )


@router.get("/tasks/{task_id}/attachments", response_model=EnvelopeDTO[List[TaskAttachmentResponseDTO]])
async def list_attachments(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskAttachmentService, Depends(get_attachment_service)]
):
    """List a task's attachments, newest first. Task owner only."""
    attachments = service.get_attachments(user_id, task_id)
    return EnvelopeDTO(
        message="Attachments retrieved successfully",
        data=[TaskAttachmentResponseDTO.from_domain(attachment) for attachment in attachments]
    )


@router.post(
    "/tasks/{task_id}/attachments",
    status_code=status.HTTP_201_CREATED,
    response_model=EnvelopeDTO[TaskAttachmentResponseDTO]
)
async def upload_attachment(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskAttachmentService, Depends(get_attachment_service)],
    file: UploadFile = File(..., description="File to attach")
):
    """
    Upload a file to a task. Task owner only.

    Size and extension limits come from the upload settings.
    """
    storage = service.storage
    if file.size is not None:
        storage.check_size(file.size)
    # at most one byte past the limit, enough to reject an oversized body
    content = await file.read(storage.max_file_size + 1)
    attachment = service.upload_attachment(
        user_id,
        task_id,
        filename=file.filename,
        file_content=content,
        content_type=file.content_type
    )
    return EnvelopeDTO(
        message="File uploaded successfully",
        data=TaskAttachmentResponseDTO.from_domain(attachment)
    )


@router.get("/attachments/{attachment_id}/download", response_class=FileResponse)
async def download_attachment(
    attachment_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskAttachmentService, Depends(get_attachment_service)]
):
    """Stream an attachment's file. Uploader only."""
    attachment, path = service.get_attachment_for_download(user_id, attachment_id)
    return FileResponse(path, media_type=attachment.mimetype, filename=attachment.filename)


@router.delete("/attachments/{attachment_id}", response_model=EnvelopeDTO)
async def delete_attachment(
    attachment_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    service: Annotated[TaskAttachmentService, Depends(get_attachment_service)]
):
    """Delete an attachment and its stored file. Uploader only."""
    service.delete_attachment(user_id, attachment_id)
    return EnvelopeDTO(message="Attachment deleted successfully")
