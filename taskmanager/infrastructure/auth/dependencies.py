"""
Authentication dependencies for FastAPI.
Turn the bearer token into the caller identity consumed by the services.
"""

from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from taskmanager.domain.models.base import AuthenticationError
from taskmanager.domain.models.user import UserRole
from taskmanager.infrastructure.auth.jwt_handler import JWTHandler


# Missing credentials are reported through AuthenticationError so they get the standard 401 body
security = HTTPBearer(auto_error=False)

_jwt_handler: Optional[JWTHandler] = None


@dataclass(frozen=True)
class CurrentUser:
    """Identity of the authenticated caller, as asserted by a verified token."""

    id: int
    role: UserRole
    email: Optional[str] = None


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    global _jwt_handler
    if _jwt_handler is None:
        _jwt_handler = JWTHandler()
    return _jwt_handler


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> CurrentUser:
    """
    FastAPI dependency to get the authenticated caller.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No authorization token provided")

    payload = jwt_handler.verify_token(credentials.credentials)

    try:
        user_id = int(payload["sub"])
        role = UserRole(payload["role"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token claims")

    return CurrentUser(id=user_id, role=role, email=payload.get("email"))


async def get_current_user_id(
    current_user: Annotated[CurrentUser, Depends(get_current_user)]
) -> int:
    """FastAPI dependency to get only the authenticated user ID."""
    return current_user.id
