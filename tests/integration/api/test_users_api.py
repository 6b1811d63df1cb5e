"""Integration tests for the Users API."""

import pytest
from httpx import AsyncClient
from jose import jwt

REGISTER = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "password": "secret123",
    "password2": "secret123",
}


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_returns_public_record(self, client: AsyncClient):
        response = await client.post("/api/users/register", json=REGISTER)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Jane Doe"
        assert data["email"] == "jane@example.com"
        assert data["avatar"].startswith("//www.gravatar.com/avatar/")
        assert "password" not in data
        assert "password_hash" not in data

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client: AsyncClient):
        await client.post("/api/users/register", json=REGISTER)

        response = await client.post("/api/users/register", json=REGISTER)

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "EMAIL_EXISTS"
        assert body["details"] == {"email": "Email already exists"}

    @pytest.mark.asyncio
    async def test_validation_errors(self, client: AsyncClient):
        response = await client.post(
            "/api/users/register",
            json={"name": "J", "email": "nope", "password": "123", "password2": "321"},
        )

        assert response.status_code == 400
        assert response.json()["details"] == {
            "name": "Name must be between 2 and 30 characters",
            "email": "Email is invalid",
            "password": "Password must be between 6 and 30 characters",
            "password2": "Passwords must match",
        }

    @pytest.mark.asyncio
    async def test_empty_body(self, client: AsyncClient):
        response = await client.post("/api/users/register", json={})

        assert response.status_code == 400
        assert set(response.json()["details"]) == {"name", "email", "password", "password2"}


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_returns_bearer_token(self, client: AsyncClient):
        registered = (await client.post("/api/users/register", json=REGISTER)).json()

        response = await client.post(
            "/api/users/login", json={"email": "jane@example.com", "password": "secret123"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        scheme, _, token = body["token"].partition(" ")
        assert scheme == "Bearer"
        claims = jwt.get_unverified_claims(token)
        assert claims["id"] == registered["id"]
        assert claims["name"] == "Jane Doe"
        assert claims["avatar"] == registered["avatar"]
        assert "exp" in claims

    @pytest.mark.asyncio
    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/users/login", json={"email": "ghost@example.com", "password": "secret123"}
        )

        assert response.status_code == 404
        assert response.json()["details"] == {"email": "User not found"}

    @pytest.mark.asyncio
    async def test_wrong_password(self, client: AsyncClient):
        await client.post("/api/users/register", json=REGISTER)

        response = await client.post(
            "/api/users/login", json={"email": "jane@example.com", "password": "wrong-one"}
        )

        assert response.status_code == 400
        assert response.json()["details"] == {"password": "Password incorrect"}


class TestCurrent:
    @pytest.mark.asyncio
    async def test_current_user(self, client: AsyncClient, auth_headers: dict[str, str]):
        response = await client.get("/api/users/current", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Jane Doe"
        assert set(data) == {"id", "name", "avatar"}

    @pytest.mark.asyncio
    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/api/users/current")

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get(
            "/api/users/current", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_TOKEN"
