"""
Integration tests for task comment endpoints.
"""

from taskmanager.infrastructure.db.models import TaskCommentModel

API = "/api"


class TestCommentsAPI:
    """Comments over HTTP."""

    def _comment(self, client, user, task_id, content="Nice work"):
        return client.post(
            f"{API}/tasks/{task_id}/comments", json={"content": content}, headers=user["headers"]
        )

    def test_create_and_list_comments(self, client, alice, create_task):
        task = create_task(alice)

        first = self._comment(client, alice, task["id"], "one")
        second = self._comment(client, alice, task["id"], "two")

        assert first.status_code == 201
        assert first.json()["data"]["user_id"] == alice["user"]["id"]

        response = client.get(f"{API}/tasks/{task['id']}/comments", headers=alice["headers"])
        assert response.status_code == 200
        ids = [comment["id"] for comment in response.json()["data"]]
        assert ids == [first.json()["data"]["id"], second.json()["data"]["id"]]

    def test_comment_on_foreign_task(self, client, alice, bob, create_task):
        task = create_task(alice)

        assert self._comment(client, bob, task["id"]).status_code == 403
        assert client.get(f"{API}/tasks/{task['id']}/comments", headers=bob["headers"]).status_code == 403

    def test_comment_on_missing_task(self, client, alice):
        assert self._comment(client, alice, 404).status_code == 404

    def test_empty_comment(self, client, alice, create_task):
        task = create_task(alice)

        assert self._comment(client, alice, task["id"], "   ").status_code == 400

    def test_update_own_comment(self, client, alice, create_task):
        task = create_task(alice)
        comment = self._comment(client, alice, task["id"], "draft").json()["data"]

        response = client.put(
            f"{API}/comments/{comment['id']}", json={"content": "final"}, headers=alice["headers"]
        )

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "final"

    def test_task_owner_cannot_edit_someone_elses_comment(self, client, db_session, alice, bob, create_task):
        """Only the author may edit or delete, even on the owner's own task."""
        task = create_task(alice)
        foreign = TaskCommentModel(task_id=task["id"], user_id=bob["user"]["id"], content="from bob")
        db_session.add(foreign)
        db_session.commit()

        edit = client.put(f"{API}/comments/{foreign.id}", json={"content": "x"}, headers=alice["headers"])
        delete = client.delete(f"{API}/comments/{foreign.id}", headers=alice["headers"])

        assert edit.status_code == 403
        assert delete.status_code == 403
        listing = client.get(f"{API}/tasks/{task['id']}/comments", headers=alice["headers"])
        assert [c["content"] for c in listing.json()["data"]] == ["from bob"]

    def test_delete_own_comment(self, client, alice, create_task):
        task = create_task(alice)
        comment = self._comment(client, alice, task["id"]).json()["data"]

        response = client.delete(f"{API}/comments/{comment['id']}", headers=alice["headers"])

        assert response.status_code == 200
        listing = client.get(f"{API}/tasks/{task['id']}/comments", headers=alice["headers"])
        assert listing.json()["data"] == []

    def test_missing_comment(self, client, alice):
        response = client.put(f"{API}/comments/77", json={"content": "x"}, headers=alice["headers"])

        assert response.status_code == 404
