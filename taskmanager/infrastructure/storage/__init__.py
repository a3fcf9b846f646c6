"""
File storage module.
"""

from .storage_service import StorageService, StoredFile, get_storage_service

__all__ = ["StorageService", "StoredFile", "get_storage_service"]
