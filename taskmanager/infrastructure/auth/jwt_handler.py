"""
JWT token handler.
Issues access tokens at login and validates them on every authenticated request.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from taskmanager.config import Settings, get_settings
from taskmanager.domain.models.base import AuthenticationError
from taskmanager.domain.models.user import User


class JWTHandler:
    """Handles JWT token creation, validation and claim extraction."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.jwt_secret = self.settings.jwt_secret_key
        self.jwt_algorithm = self.settings.jwt_algorithm
        self.expire_minutes = self.settings.jwt_access_token_expire_minutes

    def create_access_token(self, user: User, expires_minutes: Optional[int] = None) -> str:
        """
        Create a signed access token for ``user``.

        Args:
            user: Persisted user the token identifies
            expires_minutes: Override for the configured lifetime

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=expires_minutes or self.expire_minutes)

        payload = {
            "sub": str(user.id),
            "email": user.email,
            "role": user.role.value,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }

        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string, with or without the ``Bearer `` prefix

        Returns:
            Dict containing token payload

        Raises:
            AuthenticationError: If token is invalid, expired or missing claims
        """
        if token.startswith("Bearer "):
            token = token[7:]

        try:
            payload = jwt.decode(token, self.jwt_secret, algorithms=[self.jwt_algorithm])
        except ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except JWTError as e:
            raise AuthenticationError(f"Invalid token: {str(e)}")

        if "sub" not in payload:
            raise AuthenticationError("Token missing user ID (sub claim)")

        if "role" not in payload:
            raise AuthenticationError("Token missing role claim")

        return payload

    def get_user_id(self, token: str) -> int:
        """Extract the numeric user ID from a token."""
        payload = self.verify_token(token)
        try:
            return int(payload["sub"])
        except (TypeError, ValueError):
            raise AuthenticationError("Token has a malformed user ID")
