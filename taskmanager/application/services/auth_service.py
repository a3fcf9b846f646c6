"""
Authentication services for the application layer.
Registration, login and profile lookup.
"""

import logging
from typing import Tuple

from taskmanager.domain.models.base import AuthenticationError, DuplicateEntityError, EntityNotFoundError
from taskmanager.domain.models.user import User, UserRole
from taskmanager.domain.repositories.user_repository import UserRepository
from taskmanager.infrastructure.auth.jwt_handler import JWTHandler
from taskmanager.infrastructure.auth.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class AuthService:
    """Issues access tokens in exchange for valid credentials."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        jwt_handler: JWTHandler
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.jwt_handler = jwt_handler

    def register(self, name: str, email: str, password: str) -> Tuple[User, str]:
        """
        Create a colaborador account and sign the caller in.

        Returns:
            The stored user and an access token for it

        Raises:
            DuplicateEntityError: If the email is already registered
        """
        created = self.create_user(name, email, password, UserRole.COLABORADOR)
        return created, self.jwt_handler.create_access_token(created)

    def create_user(self, name: str, email: str, password: str, role: UserRole) -> User:
        """
        Create an account with an explicit role.

        Operator entry point for gestor and admin accounts; never reachable
        from the public API.

        Raises:
            DuplicateEntityError: If the email is already registered
            ValidationError: If the user data is invalid
        """
        email = email.strip().lower()
        if self.user_repository.find_by_email(email):
            raise DuplicateEntityError("User", "email", email)

        user = User(
            name=name.strip(),
            email=email,
            password_hash=self.password_hasher.hash(password),
            role=UserRole(role)
        )
        created = self.user_repository.create(user)
        logger.info(f"User {created.id} created with role {created.role.value}")
        return created

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and return the user with a fresh token.

        Unknown emails and wrong passwords fail the same way.
        """
        user = self.user_repository.find_by_email(email.strip().lower())
        if not user or not self.password_hasher.verify(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError("Invalid credentials")

        logger.info(f"User {user.id} logged in")
        return user, self.jwt_handler.create_access_token(user)

    def get_profile(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", user_id)
        return user
