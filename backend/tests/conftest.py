"""
Hauge API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.
Who:   Used by all test files in the tests/ directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (service unit tests)
    ├── token_codec:     The codec attached to the application
    ├── auth_header:     Builds {"Authorization": "Bearer <token>"} for a user id
    ├── db_engine:       In-memory SQLite engine with all tables created
    ├── db_sessions:     Session factory bound to db_engine (seeding, assertions)
    └── test_client:     HTTPX AsyncClient whose requests use db_engine
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime
from typing import AsyncGenerator, Callable, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db_session
from app.main import app
from app.models import Post, User
from app.services.token_codec import TokenCodec


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    `execute` is awaited but its result is synchronous (scalars, rowcount,
    mappings), so it returns a MagicMock rather than another AsyncMock.

    Usage:
        async def test_get_user(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = user
            result = await user_service.get_user(mock_db_session, 5)
    """
    session = AsyncMock()
    session.execute = AsyncMock(return_value=MagicMock())
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def token_codec() -> TokenCodec:
    """The application's codec, so issued tokens verify against the app."""
    return app.state.token_codec


@pytest.fixture
def auth_header(token_codec) -> Callable[[int], Dict[str, str]]:
    def build(user_id: int) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token_codec.issue(user_id)}"}
    return build


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A private in-memory SQLite database per test.

    StaticPool keeps the single connection alive, otherwise every new
    connection would see an empty database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_sessions(db_engine) -> async_sessionmaker:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_client(db_sessions) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport, with
    the session dependency pointed at the in-memory database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Seeding Helpers
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def seed_user(db_sessions):
    """Insert a user directly and return its id."""

    async def create(username: str, email: str, user_id: Optional[int] = None) -> int:
        async with db_sessions() as session:
            user = User(id=user_id, username=username, email=email)
            session.add(user)
            await session.commit()
            return user.id

    return create


@pytest.fixture
def seed_post(db_sessions):
    """Insert a post with an explicit created_at and return its id."""

    async def create(user_id: int, title: str, created_at: datetime, content: str = "") -> int:
        async with db_sessions() as session:
            post = Post(
                user_id=user_id,
                title=title,
                content=content,
                created_at=created_at,
            )
            session.add(post)
            await session.commit()
            return post.id

    return create

