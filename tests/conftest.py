"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database engine and sessions, service mocks, sample entities
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from session_api.boundary.db.base import Base
    import session_api.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory bound to the in-memory engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create a database session against the in-memory engine.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_db():
    """
    Create mock AsyncSession for service tests.

    Returns:
        AsyncMock: Session with awaitable commit/rollback
    """
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture
def mock_session_service():
    """
    Create mock SessionService for router tests.

    Returns:
        AsyncMock: Mocked SessionService with async methods
    """
    return AsyncMock()


@pytest.fixture
def make_session():
    """Factory building detached SessionModel instances."""
    from session_api.boundary.db.models.session_model import SessionModel

    def _make(id: int = 1, name: str | None = "s1", **kwargs) -> SessionModel:
        now = datetime.now(timezone.utc)
        return SessionModel(
            id=id,
            name=name,
            info=kwargs.get("info"),
            active=kwargs.get("active", True),
            created_at=kwargs.get("created_at", now),
            updated_at=kwargs.get("updated_at", now),
        )

    return _make
