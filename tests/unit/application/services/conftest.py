"""
In-memory repositories for service tests.
"""

import copy
from datetime import timedelta

import pytest

from taskmanager.domain.models.base import DuplicateEntityError
from taskmanager.domain.repositories.project_repository import ProjectRepository
from taskmanager.domain.repositories.task_repository import (
    TaskRepository, TaskCommentRepository, TaskAttachmentRepository
)
from taskmanager.domain.repositories.user_repository import UserRepository
from taskmanager.infrastructure.storage.storage_service import StorageService


class InMemoryRepository:
    """Stores copies of entities keyed by id, like a database would."""

    def __init__(self):
        self.data = {}
        self.next_id = 1

    def find_by_id(self, entity_id):
        entity = self.data.get(entity_id)
        return copy.deepcopy(entity) if entity else None

    def create(self, entity):
        entity = copy.deepcopy(entity)
        entity.id = self.next_id
        # keep creation order visible to the ordering rules
        entity.created_at = entity.created_at + timedelta(microseconds=self.next_id)
        self.next_id += 1
        self.data[entity.id] = entity
        return copy.deepcopy(entity)

    def update(self, entity):
        if entity.id not in self.data:
            return None
        self.data[entity.id] = copy.deepcopy(entity)
        return copy.deepcopy(entity)

    def delete(self, entity_id):
        return self.data.pop(entity_id, None) is not None

    def _select(self, predicate, newest_first):
        items = [copy.deepcopy(e) for e in self.data.values() if predicate(e)]
        return sorted(items, key=lambda e: (e.created_at, e.id), reverse=newest_first)


class FakeTaskRepository(InMemoryRepository, TaskRepository):
    def __init__(self):
        super().__init__()
        self.comment_repository = None
        self.attachment_repository = None

    def find_all_by_user_id(self, user_id):
        return self._select(lambda t: t.user_id == user_id, newest_first=True)

    def delete(self, task_id):
        deleted = super().delete(task_id)
        # mirror ON DELETE CASCADE
        for child in (self.comment_repository, self.attachment_repository):
            if deleted and child is not None:
                child.data = {k: v for k, v in child.data.items() if v.task_id != task_id}
        return deleted


class FakeTaskCommentRepository(InMemoryRepository, TaskCommentRepository):
    def find_by_task_id(self, task_id):
        return self._select(lambda c: c.task_id == task_id, newest_first=False)


class FakeTaskAttachmentRepository(InMemoryRepository, TaskAttachmentRepository):
    def find_by_task_id(self, task_id):
        return self._select(lambda a: a.task_id == task_id, newest_first=True)


class FakeProjectRepository(InMemoryRepository, ProjectRepository):
    def find_all(self):
        return self._select(lambda p: True, newest_first=True)

    def find_by_gestor_id(self, gestor_id):
        return self._select(lambda p: p.gestor_id == gestor_id, newest_first=True)


class FakeUserRepository(InMemoryRepository, UserRepository):
    def find_by_email(self, email):
        for user in self.data.values():
            if user.email == email.lower():
                return copy.deepcopy(user)
        return None

    def create(self, user):
        if self.find_by_email(user.email):
            raise DuplicateEntityError("User", "email", user.email)
        return super().create(user)


@pytest.fixture
def task_repository():
    return FakeTaskRepository()


@pytest.fixture
def comment_repository(task_repository):
    repository = FakeTaskCommentRepository()
    task_repository.comment_repository = repository
    return repository


@pytest.fixture
def attachment_repository(task_repository):
    repository = FakeTaskAttachmentRepository()
    task_repository.attachment_repository = repository
    return repository


@pytest.fixture
def project_repository():
    return FakeProjectRepository()


@pytest.fixture
def user_repository():
    return FakeUserRepository()


@pytest.fixture
def storage(tmp_path):
    return StorageService(
        base_dir=str(tmp_path / "uploads"),
        max_file_size=1024,
        allowed_extensions=[".txt", ".pdf"]
    )
