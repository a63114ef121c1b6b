"""Shared fixtures for the test suite.

The environment is prepared before any ``bloglist`` module is imported so that
the settings pick up the in-memory test database and a fast bcrypt cost.
"""

from __future__ import annotations

import os
from typing import AsyncGenerator, Awaitable, Callable, Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET = "test-secret-with-enough-length-for-hs256"

os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["SECRET"] = TEST_SECRET
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENABLE_FILE_LOGGING"] = "false"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database with the full schema for each test."""
    from bloglist.core.database import create_all

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the database session overridden."""
    from bloglist.core.database import get_session
    from bloglist.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def create_user(session: AsyncSession) -> Callable[..., Awaitable]:
    """Factory that stores a user with a hashed password directly in the database."""
    from bloglist.core.database.entities.users import User
    from bloglist.core.database.repositories import UserRepository
    from bloglist.server.core.security import hash_password

    async def _create(username: str = "root", password: str = "sekret", name: Optional[str] = "Superuser"):
        user = User(username=username, name=name, password_hash=hash_password(password))
        return await UserRepository(session).create(user)

    return _create


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """Build an ``Authorization`` header carrying a token for the given user."""
    from bloglist.server.core.security import create_access_token

    def _headers(user) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user.id, user.username)}"}

    return _headers


@pytest.fixture
def initial_blogs() -> list[dict]:
    return [
        {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/", "likes": 7},
        {
            "title": "Go To Statement Considered Harmful",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
            "likes": 5,
        },
        {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
            "likes": 12,
        },
        {
            "title": "First class tests",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
            "likes": 10,
        },
        {
            "title": "TDD harms architecture",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
            "likes": 0,
        },
        {
            "title": "Type wars",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
            "likes": 2,
        },
    ]
