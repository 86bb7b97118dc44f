"""
End-to-end tests for /api/auth
"""


class TestRegisterAndLogin:
    async def test_register_returns_token(self, client):
        response = await client.post(
            "/api/auth/register",
            json={"name": "Root", "email": "Root@Example.com", "password": "secret123"},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["token"]
        assert data["user"]["email"] == "root@example.com"
        assert data["user"]["role"] == "admin"
        assert "passwordHash" not in data["user"]

    async def test_register_duplicate(self, client, admin_user):
        response = await client.post(
            "/api/auth/register",
            json={"name": "Again", "email": "admin@example.com", "password": "secret123"},
        )
        assert response.status_code == 409

    async def test_register_short_password(self, client):
        response = await client.post(
            "/api/auth/register",
            json={"name": "Root", "email": "root@example.com", "password": "123"},
        )
        assert response.status_code == 422

    async def test_login_and_me(self, client, admin_user):
        response = await client.post(
            "/api/auth/login", json={"email": "admin@example.com", "password": "secret123"}
        )
        assert response.status_code == 200
        token = response.json()["data"]["token"]

        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["data"]["id"] == admin_user.id

    async def test_login_wrong_password(self, client, admin_user):
        response = await client.post(
            "/api/auth/login", json={"email": "admin@example.com", "password": "wrong-one"}
        )
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid email or password"

    async def test_me_without_token(self, client):
        response = await client.get("/api/auth/me")
        assert response.status_code == 401

    async def test_me_with_bad_token(self, client):
        response = await client.get("/api/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    async def test_unknown_route(self, client):
        response = await client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"
