"""
User mapper for converting between domain entities and database models.
"""

from taskmanager.domain.models.user import User, UserRole
from taskmanager.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at
        )

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            role=UserRole(model.role) if model.role else UserRole.COLABORADOR,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
