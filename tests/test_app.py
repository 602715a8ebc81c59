"""Application wiring and error shape tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from forum.config import Settings
from forum.database import normalize_database_url
from forum.errors import ConfigurationError, HashingError
from forum.main import create_app


def test_missing_secret_is_fatal():
    settings = Settings(_env_file=None, jwt_secret=None, database_url="sqlite:///./unused.db")
    with pytest.raises(ConfigurationError):
        create_app(settings)


def test_production_requires_secret():
    with pytest.raises(ValueError):
        Settings(
            _env_file=None,
            environment="production",
            jwt_secret=None,
            database_url="postgresql://u:p@db.internal/forum",
        )


def test_allowed_origins_include_frontend_url():
    settings = Settings(
        _env_file=None,
        cors_origins=["http://localhost:3000"],
        frontend_url="https://forum.example.org",
    )
    assert settings.allowed_origins == ["http://localhost:3000", "https://forum.example.org"]


def test_unknown_route_returns_not_found(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "path": "/api/nothing-here"}


def test_cors_preflight_for_allowed_origin(client):
    response = client.options(
        "/api/posts",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization, Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_rejects_unknown_origin(client):
    response = client.get("/api/posts", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in response.headers


def test_unexpected_error_is_generic_500(settings):
    app = create_app(settings)

    @app.get("/api/boom")
    def boom():
        raise RuntimeError("secret internals")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/boom")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    app.state.database.dispose()


def test_unreachable_store_is_fatal_at_startup(tmp_path):
    settings = Settings(
        _env_file=None,
        jwt_secret="x",
        database_url=f"sqlite:///{tmp_path / 'missing-dir' / 'forum.db'}",
    )
    app = create_app(settings)
    with pytest.raises(OperationalError):
        with TestClient(app):
            pass


def test_hashing_failure_is_500(client, app, monkeypatch):
    def fail(password):
        raise HashingError("boom")

    monkeypatch.setattr(app.state.password_hasher, "hash", fail)
    response = client.post(
        "/api/auth/register",
        json={"username": "hashless", "email": "hashless@example.com", "password": "secret1"},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "Password hashing failed."}


def test_method_not_allowed_uses_message_shape(client):
    response = client.delete("/api/posts")
    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}
    assert "GET" in response.headers["allow"]


def test_default_origins_include_hosted_frontend():
    assert "https://csnyder2004.github.io" in Settings(_env_file=None).allowed_origins


@pytest.mark.parametrize(
    "url",
    [
        "postgresql://u:p@db/forum",
        "postgres://u:p@db/forum",
    ],
)
def test_bare_postgres_url_uses_psycopg2(url):
    assert normalize_database_url(url) == "postgresql+psycopg2://u:p@db/forum"


def test_explicit_driver_url_is_untouched():
    for url in ("postgresql+psycopg2://u:p@db/forum", "sqlite:///./forum.db"):
        assert normalize_database_url(url) == url
