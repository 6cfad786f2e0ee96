"""
Integration tests for the auth API.

Covers signup/login validation, token issuance, and the bearer-token
guard that protects the report endpoints.
"""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from httpx import AsyncClient

from assessment_api.services.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


# --- Signup ---

async def test_signup_success(client: AsyncClient, credentials):
    """POST /api/auth/signup creates a user and returns a token."""
    response = await client.post("/api/auth/signup", json=credentials)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["token"]
    assert data["user"]["email"] == credentials["email"]
    assert data["user"]["name"] == "Test User"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


@pytest.mark.parametrize("missing", ["email", "password", "name"])
async def test_signup_requires_all_fields(client: AsyncClient, credentials, missing):
    credentials[missing] = ""
    response = await client.post("/api/auth/signup", json=credentials)

    assert response.status_code == 400
    assert response.json()["message"] == "Email, password, and name are required"


async def test_signup_rejects_short_password(client: AsyncClient, credentials):
    credentials["password"] = "12345"
    response = await client.post("/api/auth/signup", json=credentials)

    assert response.status_code == 400
    assert "at least 6 characters" in response.json()["message"]


async def test_signup_duplicate_email(client: AsyncClient, registered_user, credentials):
    """Signing up twice with the same email is a 409."""
    response = await client.post("/api/auth/signup", json=credentials)

    assert response.status_code == 409
    assert response.json()["message"] == "User already exists"


async def test_signup_rejects_wrong_types(client: AsyncClient):
    response = await client.post("/api/auth/signup", json={"email": ["x"], "password": 1, "name": {}})

    assert response.status_code == 400
    assert "message" in response.json()


# --- Login ---

async def test_login_success(client: AsyncClient, registered_user):
    response = await client.post("/api/auth/login", json={
        "email": registered_user["user"]["email"],
        "password": registered_user["password"],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"]["id"] == registered_user["user"]["id"]
    assert decode_access_token(data["token"])["sub"] == registered_user["user"]["id"]


async def test_login_wrong_password(client: AsyncClient, registered_user):
    response = await client.post("/api/auth/login", json={
        "email": registered_user["user"]["email"],
        "password": "wrong-password",
    })

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


async def test_login_unknown_email(client: AsyncClient):
    response = await client.post("/api/auth/login", json={
        "email": "nobody@example.com",
        "password": "whatever",
    })

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


async def test_login_requires_fields(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"email": "a@example.com"})

    assert response.status_code == 400
    assert response.json()["message"] == "Email and password are required"


# --- Bearer guard ---

async def test_me_returns_profile(client: AsyncClient, registered_user, auth_headers):
    response = await client.get("/api/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == registered_user["user"]["email"]


async def test_missing_token_is_401(client: AsyncClient):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "Access token required"


async def test_garbage_token_is_403(client: AsyncClient):
    response = await client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 403
    assert response.json()["message"] == "Invalid or expired token"


async def test_expired_token_is_403(client: AsyncClient, registered_user):
    user = SimpleNamespace(
        id=registered_user["user"]["id"],
        email=registered_user["user"]["email"],
        name=registered_user["user"]["name"],
    )
    token = create_access_token(user, expires_delta=timedelta(seconds=-10))

    response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


async def test_token_for_unknown_user_is_403(client: AsyncClient):
    user = SimpleNamespace(id="00000000-0000-0000-0000-000000000000", email="x@y.z", name="Ghost")
    token = create_access_token(user)

    response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


# --- Password hashing ---

def test_password_hash_round_trip():
    hashed = hash_password("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
    assert not verify_password("", hashed)
