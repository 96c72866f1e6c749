"""
API tests for authentication, the bearer-token guard and role checks.
"""

import uuid
from datetime import timedelta
from unittest.mock import patch

import pytest

from schooldesk.exceptions import AuthError, ConflictError
from schooldesk.security import create_access_token

from factories import make_user


# ============================================================
# Token guard
# ============================================================

def test_missing_token_rejected(anon_client):
    response = anon_client.get("/api/students")

    assert response.status_code == 401
    assert response.json() == {"detail": "Authentication required"}


def test_non_bearer_header_rejected(anon_client):
    response = anon_client.get("/api/students", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


def test_garbage_token_rejected(anon_client):
    response = anon_client.get("/api/students", headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid or expired token"}


def test_expired_token_rejected(anon_client):
    token = create_access_token(uuid.uuid4(), "a@school.com", "ADMIN", expires_delta=timedelta(minutes=-5))

    response = anon_client.get("/api/courses", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_health_is_public(anon_client):
    response = anon_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_docs_are_public(anon_client):
    assert anon_client.get("/api/openapi.json").status_code == 200


# ============================================================
# POST /api/auth/login
# ============================================================

def test_login_success(anon_client):
    user = make_user()

    with patch("schooldesk.routers.auth.auth_service.authenticate") as mock:
        mock.return_value = (user, "signed-token")
        response = anon_client.post("/api/auth/login", json={"email": "admin@school.com", "password": "admin123"})

    assert response.status_code == 200
    data = response.json()
    assert data["token"] == "signed-token"
    assert data["user"]["email"] == "admin@school.com"
    assert "passwordHash" not in data["user"]


def test_login_invalid_credentials(anon_client):
    with patch("schooldesk.routers.auth.auth_service.authenticate") as mock:
        mock.side_effect = AuthError("Invalid email or password")
        response = anon_client.post("/api/auth/login", json={"email": "admin@school.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid email or password"}


def test_login_missing_password(anon_client):
    response = anon_client.post("/api/auth/login", json={"email": "admin@school.com"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "password"


@pytest.mark.parametrize("email", ["admin@school.local", "admin"])
def test_login_unusual_email_fails_authentication(anon_client, mock_db, email):
    mock_db.execute.return_value.scalars.return_value.first.return_value = None

    response = anon_client.post("/api/auth/login", json={"email": email, "password": "x"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid email or password"}


# ============================================================
# POST /api/auth/register, GET /api/auth/me
# ============================================================

def test_register(anon_client):
    user = make_user(email="new@school.com", role="USER")

    with patch("schooldesk.routers.auth.auth_service.register_user") as mock:
        mock.return_value = user
        response = anon_client.post("/api/auth/register", json={
            "email": "new@school.com", "name": "New User", "password": "password1",
        })

    assert response.status_code == 201
    assert response.json()["role"] == "USER"


def test_register_short_password(anon_client):
    response = anon_client.post("/api/auth/register", json={
        "email": "new@school.com", "name": "New User", "password": "short",
    })
    assert response.status_code == 400


def test_register_password_over_72_bytes(anon_client):
    with patch("schooldesk.routers.auth.auth_service.register_user") as mock:
        response = anon_client.post("/api/auth/register", json={
            "email": "new@school.com", "name": "New User", "password": "\u00e9" * 40,
        })

    assert response.status_code == 400
    assert response.json()["detail"] == "Password must be at most 72 bytes"
    mock.assert_not_called()


def test_register_duplicate_email(anon_client):
    with patch("schooldesk.routers.auth.auth_service.register_user") as mock:
        mock.side_effect = ConflictError("Email already registered")
        response = anon_client.post("/api/auth/register", json={
            "email": "admin@school.com", "name": "Dup", "password": "password1",
        })

    assert response.status_code == 400


def test_me_uses_token_identity(client):
    user = make_user()

    with patch("schooldesk.routers.auth.auth_service.get_user") as mock:
        mock.return_value = user
        response = client.get("/api/auth/me")

    assert response.status_code == 200
    assert isinstance(mock.call_args[0][1], uuid.UUID)


def test_me_requires_token(anon_client):
    assert anon_client.get("/api/auth/me").status_code == 401


# ============================================================
# /api/users (ADMIN only)
# ============================================================

def test_list_users_admin(client):
    with patch("schooldesk.routers.users.auth_service.list_users") as mock:
        mock.return_value = [make_user()]
        response = client.get("/api/users")

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_list_users_forbidden_for_teacher(teacher_client):
    with patch("schooldesk.routers.users.auth_service.list_users") as mock:
        response = teacher_client.get("/api/users")

    assert response.status_code == 403
    mock.assert_not_called()


def test_create_user_invalid_role(client):
    response = client.post("/api/users", json={
        "email": "x@school.com", "name": "X", "password": "password1", "role": "ROOT",
    })

    assert response.status_code == 400
    assert response.json()["errors"][0]["rule"] == "enum"
