"""
Todo API - Test Configuration

Shared fixtures. Every test client runs the real application against a
fresh in-memory SQLite database.
"""

import os

# Must be set before the application settings are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-key-for-the-todo-api-suite"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from todo_api.context import AppContext
from todo_api.db_models import TodoRow, UserRow
from todo_api.main import app


@pytest.fixture
def client():
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
    # Clean up overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def context(client) -> AppContext:
    """The application context built at startup."""
    return client.app.state.context


def count_rows(client: TestClient, model) -> int:
    """Count rows of ``model`` in the client's database."""

    async def _count() -> int:
        async with client.app.state.context.database.session() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return client.portal.call(_count)


def count_users(client: TestClient) -> int:
    return count_rows(client, UserRow)


def count_todos(client: TestClient) -> int:
    return count_rows(client, TodoRow)


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {"email": "a@x.com", "password": "secret1"}
    client.post("/api/auth/register", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post("/api/auth/login", json=registered_user)
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_user_credentials():
    """Credentials for a second test user."""
    return {"email": "b@y.com", "password": "secret2"}


@pytest.fixture
def second_user_token(client, second_user_credentials):
    """Register a second user and get their auth token."""
    client.post("/api/auth/register", json=second_user_credentials)
    response = client.post("/api/auth/login", json=second_user_credentials)
    return response.json()["token"]


@pytest.fixture
def second_auth_headers(second_user_token):
    """Authorization headers for the second user."""
    return {"Authorization": f"Bearer {second_user_token}"}
