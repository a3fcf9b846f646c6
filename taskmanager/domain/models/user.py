"""
User domain model.
Represents a registered user and the role that drives project permissions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from taskmanager.domain.models.base import BaseEntity, ValidationError


class UserRole(str, Enum):
    """System-wide user roles."""
    COLABORADOR = "colaborador"
    GESTOR = "gestor"
    ADMIN = "admin"


@dataclass(eq=False)
class User(BaseEntity):
    """
    User entity.
    Created at registration; the password hash never leaves the service layer.
    """

    name: str
    email: str
    password_hash: str
    role: UserRole = UserRole.COLABORADOR

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.role, UserRole):
            self.role = UserRole(self.role)
        self.email = self.email.strip().lower()
        self.validate()

    def validate(self) -> None:
        """Validate user state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required", "name")

        if len(self.name) > 255:
            raise ValidationError("Name too long (max 255 characters)", "name")

        if not self.email or "@" not in self.email:
            raise ValidationError(f"Invalid email format: {self.email}", "email")

        if not self.password_hash:
            raise ValidationError("Password hash is required", "password_hash")

    def to_dict(self) -> Dict[str, Any]:
        """Public representation; drops the password hash."""
        data = super().to_dict()
        data.pop("password_hash", None)
        return data
