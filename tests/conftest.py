"""Pytest configuration and fixtures."""

# Standard library imports
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./bookclub-test.db")
os.environ.setdefault("SQL_ECHO", "false")

# Standard library imports
from uuid import uuid4

# Third-party imports
from httpx import ASGITransport, AsyncClient
import pytest
from sqlalchemy.pool import NullPool

# Local application imports
from bookclub.core.db import build_session_factory, create_async_engine, get_async_session
from bookclub.main import app
from bookclub.models import Base
from bookclub.services.access import Identity, Role
from bookclub.services.books import create_portal_status
from tests.factories import FICTION_JUNE_2025


@pytest.fixture
async def engine(tmp_path):
    """A fresh file-backed SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bookclub.db'}", poolclass=NullPool, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as async_client:
        yield async_client
    app.dependency_overrides.clear()


@pytest.fixture
def member():
    return Identity(user_id=uuid4(), role=Role.MEMBER)


@pytest.fixture
def other_member():
    return Identity(user_id=uuid4(), role=Role.MEMBER)


@pytest.fixture
def admin():
    return Identity(user_id=uuid4(), role=Role.ADMIN)


@pytest.fixture
def fiction_june():
    return FICTION_JUNE_2025


@pytest.fixture
async def nomination_portal(db, admin, fiction_june):
    """Fiction June 2025 with nominations open."""
    return await create_portal_status(db, admin, fiction_june, nomination_open=True)
