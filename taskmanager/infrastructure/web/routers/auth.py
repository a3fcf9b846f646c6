"""
Authentication router.
Registration, login and the caller's profile.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskmanager.application.dto.base_dto import EnvelopeDTO
from taskmanager.application.dto.user_dto import (
    RegisterRequestDTO,
    LoginRequestDTO,
    UserResponseDTO,
    AuthResponseDTO
)
from taskmanager.application.services.auth_service import AuthService
from taskmanager.infrastructure.auth import JWTHandler, PasswordHasher, get_current_user_id, get_jwt_handler
from taskmanager.infrastructure.db.database import get_db
from taskmanager.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


router = APIRouter()


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


def get_auth_service(
    session: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_handler: JWTHandler = Depends(get_jwt_handler)
) -> AuthService:
    """Dependency to get the auth service."""
    return AuthService(SQLAlchemyUserRepository(session), password_hasher, jwt_handler)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=EnvelopeDTO[AuthResponseDTO])
async def register(
    request: RegisterRequestDTO,
    auth_service: Annotated[AuthService, Depends(get_auth_service)]
):
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Valid email address
    - **password**: Password with at least 6 characters

    New accounts are always colaboradores; gestor and admin accounts are
    created with ``python -m taskmanager.manage create-user``.
    """
    user, token = auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password
    )
    return EnvelopeDTO(
        message="User registered successfully",
        data=AuthResponseDTO(user=UserResponseDTO.from_domain(user), token=token)
    )


@router.post("/login", response_model=EnvelopeDTO[AuthResponseDTO])
async def login(
    request: LoginRequestDTO,
    auth_service: Annotated[AuthService, Depends(get_auth_service)]
):
    """Authenticate and return an access token."""
    user, token = auth_service.login(request.email, request.password)
    return EnvelopeDTO(
        message="Login successful",
        data=AuthResponseDTO(user=UserResponseDTO.from_domain(user), token=token)
    )


@router.get("/me", response_model=EnvelopeDTO[UserResponseDTO])
async def get_profile(
    user_id: Annotated[int, Depends(get_current_user_id)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)]
):
    """Get the authenticated user's profile."""
    user = auth_service.get_profile(user_id)
    return EnvelopeDTO(message="Profile retrieved successfully", data=UserResponseDTO.from_domain(user))
