"""
Authentication infrastructure module.
Handles password hashing, JWT issuing and validation.
"""

from .jwt_handler import JWTHandler
from .password_hasher import PasswordHasher
from .dependencies import CurrentUser, get_current_user, get_current_user_id, get_jwt_handler

__all__ = [
    "JWTHandler",
    "PasswordHasher",
    "CurrentUser",
    "get_current_user",
    "get_current_user_id",
    "get_jwt_handler",
]
