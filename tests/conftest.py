"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from forum.config import Settings
from forum.database import Base
from forum.main import create_app

TEST_SECRET = "test-secret"


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's details."""

    def __init__(
        self, *args, user_id: int | None = None, username: str = "", email: str = "", **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.email = email


# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/forum", "/forum_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url=SQLALCHEMY_DATABASE_URL,
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        environment="test",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client; tables are emptied after each test."""
    with TestClient(app) as test_client:
        yield test_client

    database = app.state.database
    with database.engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    database.dispose()


@pytest.fixture
def db(app, client):
    """A session bound to the same database the app uses."""
    session = app.state.database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    response = client.post(
        "/api/auth/register",
        json={"username": "tester", "email": "test@example.com", "password": "testpass123"},
    )
    assert response.status_code == 201
    user = response.json()["user"]

    response = client.post(
        "/api/auth/login", json={"email": "test@example.com", "password": "testpass123"}
    )
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=user["id"],
        username=user["username"],
        email=user["email"],
    )
