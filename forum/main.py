"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import timedelta

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.api import auth, posts
from forum.config import Settings, get_settings
from forum.database import Database
from forum.error_handlers import register_error_handlers
from forum.services.passwords import PasswordHasher
from forum.services.tokens import TokenIssuer, TokenVerifier

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    database: Database = app.state.database
    try:
        database.ping()
        database.init_db()
    except Exception:
        logger.exception("Database connection failed")
        raise
    yield
    database.dispose()
    logger.info("Database connection closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Raises ConfigurationError when the JWT secret is absent."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Forum API",
        description="Category-tagged discussion forum with JWT authentication",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.token_issuer = TokenIssuer(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.jwt_expiration_minutes),
    )
    app.state.token_verifier = TokenVerifier(settings.jwt_secret, algorithm=settings.jwt_algorithm)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.database = Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(posts.router)

    return app


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    try:
        app = create_app(settings)
    except Exception as e:
        logger.critical(f"Failed to start server: {e}")
        sys.exit(1)

    logger.info(f"Server starting on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
