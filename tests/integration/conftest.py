"""Fixtures for SQL repository integration tests.

The SQL repositories run against an in-memory SQLite database through
aiosqlite, with the schema created from the table metadata.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from blog.persistence.database import create_session_factory
from blog.persistence.tables import metadata


@pytest_asyncio.fixture
async def engine():
    """Fresh database per test; one shared connection keeps it alive."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
