"""
Integration tests for authentication endpoints.
"""

API = "/api"


class TestAuthAPI:
    """Registration, login and token handling over HTTP."""

    def test_register(self, client):
        response = client.post(f"{API}/auth/register", json={
            "name": "Alice",
            "email": "Alice@Example.com",
            "password": "secret123",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["data"]["user"]["email"] == "alice@example.com"
        assert body["data"]["user"]["role"] == "colaborador"
        assert "password_hash" not in body["data"]["user"]
        assert body["data"]["token"]

    def test_register_duplicate_email(self, client, alice):
        response = client.post(f"{API}/auth/register", json={
            "name": "Alice Again",
            "email": "alice@example.com",
            "password": "secret123",
        })

        assert response.status_code == 409
        assert response.json()["error"] == "Conflict"
        assert response.json()["status"] == 409

    def test_register_invalid_payload(self, client):
        response = client.post(f"{API}/auth/register", json={
            "name": "A",
            "email": "not-an-email",
            "password": "123",
        })

        body = response.json()
        assert response.status_code == 400
        assert body["error"] == "Bad Request"
        assert body["status"] == 400
        fields = {error["field"] for error in body["errors"]}
        assert {"name", "email", "password"} <= fields

    def test_login(self, client, alice):
        response = client.post(f"{API}/auth/login", json={
            "email": "alice@example.com",
            "password": "secret123",
        })

        assert response.status_code == 200
        assert response.json()["data"]["user"]["id"] == alice["user"]["id"]

    def test_login_wrong_password(self, client, alice):
        response = client.post(f"{API}/auth/login", json={
            "email": "alice@example.com",
            "password": "wrong-password",
        })

        assert response.status_code == 401
        assert response.json() == {
            "error": "Unauthorized",
            "message": "Invalid credentials",
            "status": 401,
        }

    def test_login_unknown_email(self, client):
        response = client.post(f"{API}/auth/login", json={
            "email": "ghost@example.com",
            "password": "secret123",
        })

        assert response.status_code == 401

    def test_me(self, client, alice):
        response = client.get(f"{API}/auth/me", headers=alice["headers"])

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Alice"

    def test_missing_token(self, client):
        response = client.get(f"{API}/tasks")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_invalid_token(self, client):
        response = client.get(f"{API}/tasks", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401

    def test_token_role_is_used(self, client, gestor):
        response = client.get(f"{API}/auth/me", headers=gestor["headers"])

        assert response.json()["data"]["role"] == "gestor"

    def test_register_ignores_requested_role(self, client):
        response = client.post(f"{API}/auth/register", json={
            "name": "Mallory",
            "email": "mallory@example.com",
            "password": "secret123",
            "role": "admin",
        })

        assert response.status_code == 201
        assert response.json()["data"]["user"]["role"] == "colaborador"

    def test_self_registered_admin_role_grants_nothing(self, client, gestor):
        """A requested admin role at signup must not unlock other users' projects."""
        project = client.post(f"{API}/projects", json={
            "title": "Roadmap",
            "deadline": "2030-03-01T00:00:00",
        }, headers=gestor["headers"]).json()["data"]
        mallory = client.post(f"{API}/auth/register", json={
            "name": "Mallory",
            "email": "mallory@example.com",
            "password": "secret123",
            "role": "admin",
        }).json()["data"]
        headers = {"Authorization": f"Bearer {mallory['token']}"}

        assert client.delete(f"{API}/projects/{project['id']}", headers=headers).status_code == 403
        assert client.post(f"{API}/projects", json={
            "title": "Takeover",
            "deadline": "2030-03-01T00:00:00",
        }, headers=headers).status_code == 403
        assert client.get(f"{API}/projects/{project['id']}", headers=gestor["headers"]).status_code == 200

    def test_provisioned_admin_can_log_in(self, client, admin):
        response = client.get(f"{API}/auth/me", headers=admin["headers"])

        assert response.json()["data"]["role"] == "admin"

    def test_health(self, client):
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_route(self, client):
        response = client.get(f"{API}/nowhere")

        assert response.status_code == 404
        assert response.json()["status"] == 404
