import contextlib
import os

# Must run before src.config.settings is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./wedding.db")
os.environ.setdefault("RESEND_API_KEY", "")
os.environ.setdefault("SENTRY_DSN", "")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.guests.repository.orm_models import Guest  # noqa: F401 - registers the table
from src.main import app
from src.models.base import BaseModel

TEST_BASE_URL = "http://test"


@pytest.fixture(scope="function")
async def client():
    """Create a test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=TEST_BASE_URL) as ac:
        yield ac


@pytest.fixture(scope="function")
def client_factory():
    """Build test clients with FastAPI dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def _client_factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url=TEST_BASE_URL) as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return _client_factory


@pytest.fixture(scope="function")
async def db_session(tmp_path):
    """A session on a throwaway SQLite database with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test_wedding.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
