"""
Unit tests for AuthService.
"""

import pytest

from taskmanager.application.services.auth_service import AuthService
from taskmanager.config import Settings
from taskmanager.domain.models.base import AuthenticationError, DuplicateEntityError, EntityNotFoundError
from taskmanager.domain.models.user import UserRole
from taskmanager.infrastructure.auth.jwt_handler import JWTHandler
from taskmanager.infrastructure.auth.password_hasher import PasswordHasher


class TestAuthService:
    """Test cases for AuthService."""

    @pytest.fixture(autouse=True)
    def setup(self, user_repository):
        self.repository = user_repository
        self.jwt_handler = JWTHandler(Settings(jwt_secret_key="unit-test-secret"))
        self.service = AuthService(user_repository, PasswordHasher(rounds=4), self.jwt_handler)

    def test_register(self):
        user, token = self.service.register("Ana", "Ana@Example.com", "secret123")

        assert user.id is not None
        assert user.email == "ana@example.com"
        assert user.role == UserRole.COLABORADOR
        assert user.password_hash != "secret123"

        payload = self.jwt_handler.verify_token(token)
        assert payload["sub"] == str(user.id)
        assert payload["role"] == "colaborador"

    def test_register_always_creates_colaborador(self):
        user, token = self.service.register("Gil", "gil@example.com", "secret123")

        assert user.role == UserRole.COLABORADOR
        assert self.jwt_handler.verify_token(token)["role"] == "colaborador"

    def test_create_user_with_role(self):
        user = self.service.create_user("Gil", "Gil@Example.com", "secret123", UserRole.GESTOR)

        assert user.role == UserRole.GESTOR
        assert user.email == "gil@example.com"
        assert self.repository.find_by_email("gil@example.com").role == UserRole.GESTOR

        logged_in, token = self.service.login("gil@example.com", "secret123")
        assert logged_in.id == user.id
        assert self.jwt_handler.verify_token(token)["role"] == "gestor"

    def test_create_user_duplicate_email(self):
        self.service.register("Ana", "ana@example.com", "secret123")

        with pytest.raises(DuplicateEntityError):
            self.service.create_user("Ana", "ana@example.com", "secret123", UserRole.ADMIN)

    def test_register_duplicate_email(self):
        self.service.register("Ana", "ana@example.com", "secret123")

        with pytest.raises(DuplicateEntityError, match="already exists"):
            self.service.register("Other", "ANA@example.com", "secret456")

    def test_login(self):
        registered, _ = self.service.register("Ana", "ana@example.com", "secret123")

        user, token = self.service.login("ana@example.com", "secret123")

        assert user.id == registered.id
        assert self.jwt_handler.get_user_id(token) == registered.id

    def test_login_wrong_password(self):
        self.service.register("Ana", "ana@example.com", "secret123")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            self.service.login("ana@example.com", "wrong")

    def test_login_unknown_email(self):
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            self.service.login("nobody@example.com", "secret123")

    def test_get_profile(self):
        registered, _ = self.service.register("Ana", "ana@example.com", "secret123")

        assert self.service.get_profile(registered.id).name == "Ana"

        with pytest.raises(EntityNotFoundError):
            self.service.get_profile(999)
