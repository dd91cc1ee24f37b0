"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Book Rental API.

Store Handle Pattern
====================
There is no module-level engine. The application builds a single
``Database`` object during startup (see ``rental_api.main.lifespan``),
keeps it on ``app.state.database`` and disposes it on shutdown:

    database = Database(settings.database_url)
    database.create_tables()
    ...
    database.close()

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → ``get_db`` opens a session from the handle
2. Services use that session for every operation in the request
3. Rollback if the handler raised
4. Close the session when the request ends
"""

import logging
from collections.abc import Generator
from datetime import UTC, datetime
from uuid import uuid4

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses ``Base.metadata`` to discover tables for migrations.
    """
    pass


def generate_id() -> str:
    """Generate an opaque record identifier (32 hex characters)."""
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(UTC)


def build_engine(
    database_url: str,
    pool_size: int = 5,
    max_overflow: int = 10,
    echo: bool = False,
) -> Engine:
    """
    Create an engine suited to the given URL.

    SQLite does not support connection pool sizing, and an in-memory SQLite
    database only lives as long as its single connection, so it gets a
    StaticPool.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=echo,
    )


class Database:
    """
    Explicitly constructed handle to the persistent store.

    Wraps the engine and its session factory. One instance is created per
    application and passed to request handlers through ``get_db``.

    Usage:
        database = Database("sqlite:///./rentals.db")
        database.create_tables()
        with database.session() as session:
            ...
        database.close()
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ) -> None:
        self.url = database_url
        self.engine = build_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            echo=echo,
        )
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    def session(self) -> Session:
        """Open a new session bound to this store."""
        return self.session_factory()

    def create_tables(self) -> None:
        """
        Create all database tables.

        WARNING: In production, use Alembic migrations instead!
        """
        # Models must be imported so they are registered on Base.metadata
        import rental_api.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()
        logger.info("Database connections closed")


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Opens a session from the ``Database`` handle stored on the application
    during startup. The session is rolled back if the route raised and is
    always closed when the request ends.

    Yields:
        SQLAlchemy Session instance
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
