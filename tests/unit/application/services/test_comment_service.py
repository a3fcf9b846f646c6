"""
Unit tests for TaskCommentService.
"""

import pytest

from taskmanager.application.services.task_service import TaskCommentService
from taskmanager.domain.models.base import AuthorizationError, EntityNotFoundError, ValidationError
from taskmanager.domain.models.task import Task, TaskComment

OWNER_ID = 1
OTHER_ID = 2


class TestTaskCommentService:
    """Test cases for TaskCommentService."""

    @pytest.fixture(autouse=True)
    def setup(self, task_repository, comment_repository):
        self.task_repository = task_repository
        self.comment_repository = comment_repository
        self.service = TaskCommentService(comment_repository, task_repository)
        self.task = task_repository.create(Task(user_id=OWNER_ID, title="Task"))

    def test_create_comment(self):
        comment = self.service.create_comment(OWNER_ID, self.task.id, "  First!  ")

        assert comment.id is not None
        assert comment.task_id == self.task.id
        assert comment.user_id == OWNER_ID
        assert comment.content == "First!"

    def test_create_comment_on_foreign_task(self):
        with pytest.raises(AuthorizationError):
            self.service.create_comment(OTHER_ID, self.task.id, "Hi")

    def test_create_comment_on_missing_task(self):
        with pytest.raises(EntityNotFoundError):
            self.service.create_comment(OWNER_ID, 42, "Hi")

    def test_empty_comment_rejected(self):
        with pytest.raises(ValidationError):
            self.service.create_comment(OWNER_ID, self.task.id, "   ")

    def test_list_comments_oldest_first(self):
        first = self.service.create_comment(OWNER_ID, self.task.id, "one")
        second = self.service.create_comment(OWNER_ID, self.task.id, "two")

        comments = self.service.get_task_comments(OWNER_ID, self.task.id)

        assert [c.id for c in comments] == [first.id, second.id]

    def test_list_comments_on_foreign_task(self):
        with pytest.raises(AuthorizationError):
            self.service.get_task_comments(OTHER_ID, self.task.id)

    def test_update_comment(self):
        comment = self.service.create_comment(OWNER_ID, self.task.id, "draft")

        updated = self.service.update_comment(OWNER_ID, comment.id, "final")

        assert updated.content == "final"

    def test_non_author_cannot_edit_even_as_task_owner(self):
        """Authorship, not task ownership, governs comment edits."""
        comment = self.comment_repository.create(
            TaskComment(task_id=self.task.id, user_id=OTHER_ID, content="placeholder")
        )

        with pytest.raises(AuthorizationError, match="edit your own comments"):
            self.service.update_comment(OWNER_ID, comment.id, "changed")

        with pytest.raises(AuthorizationError, match="delete your own comments"):
            self.service.delete_comment(OWNER_ID, comment.id)

        assert self.comment_repository.find_by_id(comment.id).content == "placeholder"

    def test_delete_comment(self):
        comment = self.service.create_comment(OWNER_ID, self.task.id, "bye")

        self.service.delete_comment(OWNER_ID, comment.id)

        assert self.comment_repository.find_by_id(comment.id) is None

    def test_delete_missing_comment(self):
        with pytest.raises(EntityNotFoundError, match="Comment"):
            self.service.delete_comment(OWNER_ID, 404)
