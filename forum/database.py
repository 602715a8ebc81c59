"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from forum.config import Settings

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


def normalize_database_url(url: str) -> str:
    """Pin bare postgres URLs to psycopg2, the only driver installed."""
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+psycopg2://" + url[len(prefix) :]
    return url


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, settings: Settings):
        url = normalize_database_url(settings.database_url)
        if url.startswith("sqlite"):
            self.engine = create_engine(url, connect_args={"check_same_thread": False})
        else:
            self.engine = create_engine(url, pool_pre_ping=True, pool_size=5, max_overflow=10)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self) -> None:
        """Create all tables that don't exist yet."""
        # Import all models here so they are registered with Base.metadata
        from forum import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> None:
        """Run a trivial query; raises if the store is unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info(f"Database connected: {self.engine.url.render_as_string(hide_password=True)}")

    def dispose(self) -> None:
        self.engine.dispose()

    def session(self) -> Generator[Session, None, None]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    yield from request.app.state.database.session()
