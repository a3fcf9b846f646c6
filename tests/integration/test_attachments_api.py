"""
Integration tests for attachment endpoints and task deletion cascade.
"""

from taskmanager.infrastructure.db.models import TaskAttachmentModel, TaskCommentModel

API = "/api"


class TestAttachmentsAPI:
    """Attachments over HTTP."""

    def _upload(self, client, user, task_id, filename="notes.txt", content=b"hello world"):
        return client.post(
            f"{API}/tasks/{task_id}/attachments",
            files={"file": (filename, content, "text/plain")},
            headers=user["headers"]
        )

    def test_upload_and_list(self, client, storage, alice, create_task):
        task = create_task(alice)

        response = self._upload(client, alice, task["id"])

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["filename"] == "notes.txt"
        assert data["filesize"] == 11
        assert data["mimetype"] == "text/plain"
        assert data["user_id"] == alice["user"]["id"]
        assert "filepath" not in data

        listing = client.get(f"{API}/tasks/{task['id']}/attachments", headers=alice["headers"])
        assert [a["id"] for a in listing.json()["data"]] == [data["id"]]

    def test_upload_to_foreign_task(self, client, alice, bob, create_task):
        task = create_task(alice)

        assert self._upload(client, bob, task["id"]).status_code == 403

    def test_upload_too_large(self, client, alice, create_task):
        task = create_task(alice)

        response = self._upload(client, alice, task["id"], content=b"x" * 2048)

        assert response.status_code == 400
        assert "too large" in response.json()["message"]

    def test_upload_at_size_limit(self, client, storage, alice, create_task):
        task = create_task(alice)

        response = self._upload(client, alice, task["id"], content=b"x" * storage.max_file_size)

        assert response.status_code == 201
        assert response.json()["data"]["filesize"] == storage.max_file_size

    def test_upload_disallowed_type(self, client, alice, create_task):
        task = create_task(alice)

        response = self._upload(client, alice, task["id"], filename="virus.exe")

        assert response.status_code == 400

    def test_upload_without_file(self, client, alice, create_task):
        task = create_task(alice)

        response = client.post(f"{API}/tasks/{task['id']}/attachments", headers=alice["headers"])

        assert response.status_code == 400

    def test_download(self, client, alice, create_task):
        task = create_task(alice)
        attachment = self._upload(client, alice, task["id"]).json()["data"]

        response = client.get(f"{API}/attachments/{attachment['id']}/download", headers=alice["headers"])

        assert response.status_code == 200
        assert response.content == b"hello world"
        assert "notes.txt" in response.headers["content-disposition"]

    def test_download_by_other_user(self, client, alice, bob, create_task):
        task = create_task(alice)
        attachment = self._upload(client, alice, task["id"]).json()["data"]

        response = client.get(f"{API}/attachments/{attachment['id']}/download", headers=bob["headers"])

        assert response.status_code == 403

    def test_delete_attachment(self, client, storage, db_session, alice, create_task):
        task = create_task(alice)
        attachment = self._upload(client, alice, task["id"]).json()["data"]
        filepath = db_session.get(TaskAttachmentModel, attachment["id"]).filepath

        response = client.delete(f"{API}/attachments/{attachment['id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert not storage.exists(filepath)
        listing = client.get(f"{API}/tasks/{task['id']}/attachments", headers=alice["headers"])
        assert listing.json()["data"] == []

    def test_delete_attachment_by_other_user(self, client, alice, bob, create_task):
        task = create_task(alice)
        attachment = self._upload(client, alice, task["id"]).json()["data"]

        response = client.delete(f"{API}/attachments/{attachment['id']}", headers=bob["headers"])

        assert response.status_code == 403

    def test_delete_task_cascades(self, client, storage, db_session, alice, create_task):
        """Deleting a task removes its comments, attachment rows and stored files."""
        task = create_task(alice)
        client.post(f"{API}/tasks/{task['id']}/comments", json={"content": "hi"}, headers=alice["headers"])
        attachment = self._upload(client, alice, task["id"]).json()["data"]
        filepath = db_session.get(TaskAttachmentModel, attachment["id"]).filepath
        db_session.expunge_all()

        response = client.delete(f"{API}/tasks/{task['id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert db_session.query(TaskCommentModel).filter_by(task_id=task["id"]).count() == 0
        assert db_session.query(TaskAttachmentModel).filter_by(task_id=task["id"]).count() == 0
        assert not storage.exists(filepath)
