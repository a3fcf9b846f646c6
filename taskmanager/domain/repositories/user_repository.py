"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from taskmanager.domain.models.user import User


class UserRepository(ABC):
    """Repository interface for User entity."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email (case-insensitive).
        Returns None if not found.
        """
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Persist a new user.
        Raises DuplicateEntityError if the email is already registered.
        """
        pass
