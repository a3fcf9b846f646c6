"""
Local disk storage for task attachments.
Files are written under the configured upload directory with generated names.
"""

import logging
import mimetypes
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from taskmanager.config import settings
from taskmanager.domain.models.base import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    """Result of writing an upload to disk."""

    filename: str
    filepath: str
    filesize: int
    mimetype: str


class StorageService:
    """Service for storing, locating and removing uploaded files."""

    def __init__(
        self,
        base_dir: Optional[str] = None,
        max_file_size: Optional[int] = None,
        allowed_extensions: Optional[List[str]] = None
    ):
        """Initialize storage rooted at ``base_dir`` (the configured upload dir by default)."""
        self.base_dir = Path(base_dir or settings.upload_dir).resolve()
        self.max_file_size = max_file_size if max_file_size is not None else settings.max_upload_size_bytes
        self.allowed_extensions = [
            ext.lower() for ext in (allowed_extensions or settings.allowed_upload_extensions)
        ]

    def save(
        self,
        file_content: bytes,
        filename: str,
        content_type: Optional[str] = None,
        folder: Optional[str] = None
    ) -> StoredFile:
        """
        Validate and write a file.

        Args:
            file_content: File content as bytes
            filename: Original filename supplied by the client
            content_type: MIME type declared by the client
            folder: Optional sub-directory (for example the task id)

        Returns:
            StoredFile describing what was written; ``filepath`` is relative to the storage root
        """
        safe_name = self._sanitize_filename(filename)
        self._validate_file(file_content, safe_name)

        if not content_type or content_type == "application/octet-stream":
            guessed, _ = mimetypes.guess_type(safe_name)
            content_type = guessed or content_type or "application/octet-stream"

        relative_path = self._generate_file_path(safe_name, folder)
        target = self.base_dir / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(file_content)

        logger.info(f"Stored file {safe_name} ({len(file_content)} bytes) at {relative_path}")

        return StoredFile(
            filename=safe_name,
            filepath=relative_path,
            filesize=len(file_content),
            mimetype=content_type
        )

    def resolve(self, filepath: str) -> Path:
        """
        Map a stored relative path to an absolute path inside the storage root.

        Raises:
            ValidationError: If the path escapes the storage root
        """
        target = (self.base_dir / filepath).resolve()
        if self.base_dir != target and self.base_dir not in target.parents:
            raise ValidationError("Invalid file path", "filepath")
        return target

    def exists(self, filepath: str) -> bool:
        return self.resolve(filepath).is_file()

    def delete(self, filepath: str) -> bool:
        """Remove a stored file. Returns False if it was already gone."""
        target = self.resolve(filepath)
        if not target.is_file():
            logger.warning(f"Stored file {filepath} not found for deletion")
            return False

        target.unlink()
        logger.info(f"Deleted stored file {filepath}")
        return True

    def check_size(self, size: int) -> None:
        """Raise ValidationError when ``size`` bytes exceed the upload limit."""
        if size > self.max_file_size:
            max_mb = self.max_file_size / (1024 * 1024)
            raise ValidationError(f"File too large (max {max_mb:g}MB)", "file")

    def _validate_file(self, file_content: bytes, filename: str) -> None:
        if not file_content:
            raise ValidationError("Uploaded file is empty", "file")

        self.check_size(len(file_content))

        extension = Path(filename).suffix.lower()
        if self.allowed_extensions and extension not in self.allowed_extensions:
            raise ValidationError(f"File type '{extension or filename}' is not allowed", "file")

    def _sanitize_filename(self, filename: Optional[str]) -> str:
        # Drop any directory part a client may send
        name = os.path.basename((filename or "").replace("\\", "/")).strip()
        if not name or name in (".", ".."):
            raise ValidationError("Filename is required", "filename")
        return name[:255]

    def _generate_file_path(self, filename: str, folder: Optional[str] = None) -> str:
        unique_name = f"{uuid.uuid4().hex}{Path(filename).suffix.lower()}"
        if folder:
            return f"{folder}/{unique_name}"
        return unique_name


_storage_service: Optional[StorageService] = None


def get_storage_service() -> StorageService:
    """Get the process-wide storage service."""
    global _storage_service
    if _storage_service is None:
        _storage_service = StorageService()
    return _storage_service
