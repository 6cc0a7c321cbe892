"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, document store, instant sleeper for job sources
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session in the test (lazy imported to avoid settings issues)
    """
    from learnhub.boundary.db.base import Base
    from learnhub.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the in-memory engine."""
    from learnhub.boundary.db.connection import create_session_factory

    return create_session_factory(test_engine)


@pytest.fixture
def document_store(test_session_factory):
    """Document store backed by the in-memory database."""
    from learnhub.boundary.db.document_store import DocumentStore

    return DocumentStore(test_session_factory)


@pytest.fixture
def instant_sleep():
    """Sleep replacement that records requested delays and yields control once."""
    import asyncio

    delays: list[float] = []

    async def sleep(seconds: float) -> None:
        delays.append(seconds)
        await asyncio.sleep(0)

    sleep.delays = delays
    return sleep
