"""
Unit tests for password hashing and JWT handling.
"""

import pytest

from taskmanager.config import Settings
from taskmanager.domain.models.base import AuthenticationError
from taskmanager.domain.models.user import User, UserRole
from taskmanager.infrastructure.auth.jwt_handler import JWTHandler
from taskmanager.infrastructure.auth.password_hasher import PasswordHasher


@pytest.fixture
def jwt_handler():
    return JWTHandler(Settings(jwt_secret_key="unit-test-secret", jwt_access_token_expire_minutes=5))


@pytest.fixture
def user():
    return User(id=12, name="Gil", email="gil@example.com", password_hash="hash", role=UserRole.GESTOR)


class TestPasswordHasher:
    """Test cases for PasswordHasher."""

    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_and_verify(self):
        hashed = self.hasher.hash("secret123")

        assert hashed != "secret123"
        assert self.hasher.verify("secret123", hashed)
        assert not self.hasher.verify("secret124", hashed)

    def test_hashes_are_salted(self):
        assert self.hasher.hash("secret123") != self.hasher.hash("secret123")

    def test_malformed_hash_never_matches(self):
        assert not self.hasher.verify("secret123", "not-a-bcrypt-hash")


class TestJWTHandler:
    """Test cases for JWTHandler."""

    def test_token_carries_id_and_role(self, jwt_handler, user):
        token = jwt_handler.create_access_token(user)

        payload = jwt_handler.verify_token(token)

        assert payload["sub"] == "12"
        assert payload["role"] == "gestor"
        assert payload["email"] == "gil@example.com"
        assert jwt_handler.get_user_id(f"Bearer {token}") == 12

    def test_expired_token(self, jwt_handler, user):
        token = jwt_handler.create_access_token(user, expires_minutes=-1)

        with pytest.raises(AuthenticationError, match="expired"):
            jwt_handler.verify_token(token)

    def test_token_signed_with_other_secret(self, jwt_handler, user):
        other = JWTHandler(Settings(jwt_secret_key="another-secret"))
        token = other.create_access_token(user)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            jwt_handler.verify_token(token)

    def test_garbage_token(self, jwt_handler):
        with pytest.raises(AuthenticationError):
            jwt_handler.verify_token("not.a.token")
