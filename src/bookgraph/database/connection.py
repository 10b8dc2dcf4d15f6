"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

# Global shared connection pools
_engine = None
_async_engine = None
_async_session_local = None
_initialized = False
_init_lock = threading.Lock()  # Protect initialization from race conditions


def get_database_url() -> str:
    """Get database URL, checking environment variables first for test compatibility."""
    db_url = os.getenv("BOOKGRAPH_DATABASE_URL")
    if not db_url:
        db_url = settings.database_url
    return db_url


def get_async_database_url(db_url: str) -> str:
    """Map a sync database URL onto its async driver."""
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if db_url.startswith("sqlite://"):
        return db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return db_url


def _engine_options(db_url: str) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.sql_echo}
    # SQLite engines use their own pool classes
    if db_url.startswith("postgresql"):
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


def reset_database():
    """Reset database connections (for tests)."""
    global _engine, _async_engine, _async_session_local, _initialized
    _engine = None
    _async_engine = None
    _async_session_local = None
    _initialized = False


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        if "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        return False, f"Database connection error ({type(e).__name__}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False):
    """Initialize shared database connection pools.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously.
    """
    global _engine, _async_engine, _async_session_local, _initialized

    # Fast path: already initialized, no lock needed
    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = database_url or get_database_url()

        _engine = create_engine(db_url, **_engine_options(db_url))

        _async_engine = create_async_engine(
            get_async_database_url(db_url), **_engine_options(db_url)
        )
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=db_url)


def get_engine():
    """Get the shared SQLAlchemy engine."""
    if _engine is None:
        init_database()
    return _engine


def get_async_engine():
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    return _async_engine


def create_tables() -> None:
    """Create all tables straight from the ORM metadata (no migrations)."""
    from ..dbmodels import Base

    Base.metadata.create_all(get_engine())
    logger.info("Database tables created")


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session (async) from shared pool.

    Work committed inside the block stays committed if the block later
    raises; only uncommitted changes are rolled back.
    """
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Async database not available")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
