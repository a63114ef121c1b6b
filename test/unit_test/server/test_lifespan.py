"""
Unit tests for FastAPI application lifespan management.

Tests verify that the application startup and shutdown events are properly
handled, including database initialization.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

pytestmark = pytest.mark.asyncio


class TestLifespan:
    """Test application startup and shutdown events."""

    async def test_lifespan_startup_initializes_database(self):
        from fastapi import FastAPI

        from bloglist.server.main import lifespan

        with patch("bloglist.server.main.init_db", new_callable=AsyncMock) as mock_init_db:
            async with lifespan(FastAPI()) as result:
                mock_init_db.assert_called_once()
                assert result is None

    async def test_lifespan_logs_startup_and_shutdown(self):
        from fastapi import FastAPI

        from bloglist.server.main import lifespan

        with (
            patch("bloglist.server.main.init_db", new_callable=AsyncMock),
            patch("bloglist.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

        calls = [call[0][0] for call in mock_logger.info.call_args_list]
        assert any("Starting up" in call for call in calls)
        assert any("Database initialized successfully" in call for call in calls)
        assert any("Shutting down" in call for call in calls)

    async def test_lifespan_propagates_init_db_failure(self):
        from fastapi import FastAPI

        from bloglist.server.main import lifespan

        with patch("bloglist.server.main.init_db", new_callable=AsyncMock) as mock_init_db:
            mock_init_db.side_effect = RuntimeError("Database connection failed")

            with pytest.raises(RuntimeError, match="Database connection failed"):
                async with lifespan(FastAPI()):
                    pass


class TestDatabaseInitialization:
    """Test database initialization functionality."""

    async def test_init_db_creates_tables(self, test_engine: AsyncEngine):
        from bloglist.core.database import init_db

        with patch("bloglist.core.database.session.engine", test_engine):
            await init_db()

        async with test_engine.begin() as conn:
            table_names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert {"users", "blogs"} <= set(table_names)

    async def test_get_session_returns_async_session(self, test_engine: AsyncEngine):
        from bloglist.core.database import get_session

        session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

        with patch("bloglist.core.database.session.async_session_maker", session_maker):
            async for session in get_session():
                assert isinstance(session, AsyncSession)
                result = await session.execute(text("SELECT 1"))
                assert result.scalar() == 1
                break

    async def test_engine_is_async_engine(self):
        from bloglist.core.database import engine

        assert isinstance(engine, AsyncEngine)


class TestUtils:
    def test_create_engine_rewrites_postgres_urls(self):
        from bloglist.core.database import create_engine

        engine = create_engine("postgres://user:pw@localhost:5432/bloglist")

        assert engine.url.drivername == "postgresql+asyncpg"

    def test_create_engine_keeps_other_drivers(self):
        from bloglist.core.database import create_engine

        engine = create_engine("sqlite+aiosqlite:///:memory:")

        assert engine.url.drivername == "sqlite+aiosqlite"


class TestApplication:
    def test_routers_are_mounted_under_api(self):
        from bloglist.server.main import app

        paths = {route.path for route in app.routes}
        assert {"/api/blogs", "/api/blogs/{blog_id}", "/api/blogs/stats", "/api/users", "/api/login"} <= paths
        assert "/health" in paths
