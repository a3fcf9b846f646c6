"""
Fixtures for HTTP tests.
Each test gets a fresh in-memory database and upload directory.
"""

from typing import Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from taskmanager.infrastructure.auth import PasswordHasher
from taskmanager.infrastructure.db.database import Base, create_all_tables, create_db_engine, get_db
from taskmanager.infrastructure.storage import StorageService, get_storage_service
from taskmanager.infrastructure.web.routers.auth import get_password_hasher
from taskmanager.main import app
from taskmanager.manage import create_user

API = "/api"
PASSWORD = "secret123"


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    create_all_tables(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def storage(tmp_path):
    return StorageService(base_dir=str(tmp_path / "uploads"), max_file_size=1024)


@pytest.fixture
def client(engine, storage):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_service] = lambda: storage
    app.dependency_overrides[get_password_hasher] = lambda: PasswordHasher(rounds=4)

    # No context manager: the lifespan would create tables on the configured database
    yield TestClient(app)

    app.dependency_overrides.clear()


def _with_headers(response) -> Dict:
    data = response.json()["data"]
    data["headers"] = {"Authorization": f"Bearer {data['token']}"}
    return data


def _register(client: TestClient, name: str, email: str) -> Dict:
    """Register a colaborador and return ``{"user": ..., "token": ..., "headers": ...}``."""
    response = client.post(f"{API}/auth/register", json={
        "name": name,
        "email": email,
        "password": PASSWORD,
    })
    assert response.status_code == 201, response.text
    return _with_headers(response)


def _provision(client: TestClient, engine, name: str, email: str, role: str) -> Dict:
    """Create an account with ``role`` the way operators do, then log it in."""
    create_user(
        email,
        name,
        role,
        PASSWORD,
        session_factory=sessionmaker(autocommit=False, autoflush=False, bind=engine),
        password_hasher=PasswordHasher(rounds=4)
    )
    response = client.post(f"{API}/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return _with_headers(response)


@pytest.fixture
def alice(client):
    return _register(client, "Alice", "alice@example.com")


@pytest.fixture
def bob(client):
    return _register(client, "Bob", "bob@example.com")


@pytest.fixture
def gestor(client, engine):
    return _provision(client, engine, "Gina", "gina@example.com", "gestor")


@pytest.fixture
def other_gestor(client, engine):
    return _provision(client, engine, "Gus", "gus@example.com", "gestor")


@pytest.fixture
def admin(client, engine):
    return _provision(client, engine, "Ada", "ada@example.com", "admin")


@pytest.fixture
def register(client, engine):
    """Factory fixture adding users; colaboradores self-register, other roles are provisioned."""
    def _factory(name: str, email: str, role: str = "colaborador") -> Dict:
        if role == "colaborador":
            return _register(client, name, email)
        return _provision(client, engine, name, email, role)
    return _factory


@pytest.fixture
def create_task(client):
    """Factory fixture creating a task through the API."""
    def _factory(user: Dict, title: str = "Task") -> Dict:
        response = client.post(f"{API}/tasks", json={"title": title}, headers=user["headers"])
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _factory
