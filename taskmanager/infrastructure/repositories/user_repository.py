"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskmanager.domain.models.base import DuplicateEntityError
from taskmanager.domain.models.user import User
from taskmanager.domain.repositories.user_repository import UserRepository
from taskmanager.infrastructure.db.models import UserModel
from taskmanager.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = UserMapper()

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        model = self.session.get(UserModel, user_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        model = self.session.query(UserModel).filter(
            func.lower(UserModel.email) == email.strip().lower()
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def create(self, user: User) -> User:
        """Insert a new user, refusing duplicate emails."""
        if self.find_by_email(user.email):
            raise DuplicateEntityError("User", "email", user.email)

        model = self.mapper.domain_to_model(user)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration
            self.session.rollback()
            raise DuplicateEntityError("User", "email", user.email)

        self.session.refresh(model)
        return self.mapper.model_to_domain(model)
