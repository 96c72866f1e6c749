"""
Shared test configuration.
Overrides the get_db dependency so no test ever connects to PostgreSQL, and
provides HTTP clients carrying a bearer token for each role.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from schooldesk.database import get_db
from schooldesk.main import app
from schooldesk.security import create_access_token


def _client_for(mock_db, role=None):
    app.dependency_overrides[get_db] = lambda: mock_db
    headers = {}
    if role is not None:
        token = create_access_token(uuid.uuid4(), f"{role.lower()}@school.com", role)
        headers["Authorization"] = f"Bearer {token}"
    return TestClient(app, headers=headers)


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Test client authenticated as an ADMIN, with a mocked database."""
    with _client_for(mock_db, "ADMIN") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def teacher_client(mock_db):
    with _client_for(mock_db, "TEACHER") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client(mock_db):
    """Test client without any Authorization header."""
    with _client_for(mock_db) as c:
        yield c
    app.dependency_overrides.clear()
