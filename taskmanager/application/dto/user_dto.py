"""
User and authentication DTOs for the application layer.
"""

from pydantic import EmailStr, Field

from taskmanager.domain.models.user import User, UserRole
from .base_dto import BaseDTO, RequestDTO, ResponseDTO


class RegisterRequestDTO(RequestDTO):
    """DTO for user registration."""

    name: str = Field(min_length=2, max_length=255, description="Display name")
    email: EmailStr = Field(description="Login email, unique")
    password: str = Field(min_length=6, max_length=128, description="Plain password, at least 6 characters")


class LoginRequestDTO(RequestDTO):
    """DTO for login."""

    email: EmailStr = Field(description="Login email")
    password: str = Field(min_length=1, description="Plain password")


class UserResponseDTO(ResponseDTO):
    """Public user profile. Never carries the password hash."""

    name: str = Field(description="Display name")
    email: str = Field(description="Login email")
    role: UserRole = Field(description="User role")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at
        )


class AuthResponseDTO(BaseDTO):
    """Login / registration result."""

    user: UserResponseDTO
    token: str
    token_type: str = "bearer"
