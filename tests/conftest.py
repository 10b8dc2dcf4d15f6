"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> str:
    """Return the URL of a fresh file-backed SQLite database."""
    return f"sqlite:///{tmp_path / 'bookgraph-test.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(test_database: str) -> AsyncGenerator[str, None]:
    """Point the shared connection pools at the test database and create tables."""
    from bookgraph.database.connection import (
        create_tables,
        get_async_engine,
        get_engine,
        init_database,
        reset_database,
    )

    reset_database()
    init_database(test_database, force_reinit=True)
    create_tables()

    yield test_database

    await get_async_engine().dispose()
    get_engine().dispose()
    reset_database()


@pytest.fixture
def mock_info() -> Any:
    """Create a mock GraphQL info object with request context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock()}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
