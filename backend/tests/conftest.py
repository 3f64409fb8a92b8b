"""
Bookshelf API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throwaway SQLite database BEFORE any
       bookshelf module is imported, so the module-level engine never sees
       the production URL.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── database:      creates the schema, drops it afterwards
    ├── db_session:    AsyncSession on the test database
    ├── test_client:   HTTPX AsyncClient, ownership disabled
    ├── owner_client:  HTTPX AsyncClient, ownership enforced (X-Owner-ID)
    └── fake_store:    MagicMock with AsyncMock store methods
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
_TEST_DB_DIR = tempfile.mkdtemp(prefix="bookshelf_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENFORCE_OWNERSHIP"] = "false"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from bookshelf.config import Settings  # noqa: E402
from bookshelf.database import Base, async_session_factory, engine  # noqa: E402
from bookshelf.models.document import Document  # noqa: E402,F401
from bookshelf.services.document_store import StoreOk  # noqa: E402


@pytest_asyncio.fixture
async def database():
    """
    Fresh schema for each test.

    The engine is disposed afterwards so no pooled aiosqlite connection
    outlives the event loop it was opened on.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with async_session_factory() as session:
        yield session
        await session.rollback()


async def _client_for(app_settings: Settings):
    from bookshelf.main import create_app
    app = create_app(app_settings)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(database):
    """
    Async HTTP client talking to an app with ownership disabled.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/authors")
            assert response.status_code == 200
    """
    async with await _client_for(Settings(enforce_ownership=False)) as client:
        yield client


@pytest_asyncio.fixture
async def owner_client(database):
    """Async HTTP client talking to an app with ownership enforced."""
    async with await _client_for(Settings(enforce_ownership=True, owner_header="X-Owner-ID")) as client:
        yield client


@pytest.fixture
def fake_store():
    """
    A stand-in DocumentStore for service unit tests.

    Usage:
        fake_store.find_by_id.return_value = StoreNotFound("authors", "abc")
    """
    store = MagicMock()
    store.collection = "authors"
    store.find_all = AsyncMock()
    store.find_by_id = AsyncMock()
    store.create = AsyncMock()
    store.update = AsyncMock()
    store.delete = AsyncMock()
    store.commit = AsyncMock(return_value=StoreOk(None))
    return store


@pytest.fixture
def make_document():
    """Factory for detached Document instances."""
    def _make(document_id="0" * 32, body=None, owner=None, collection="authors"):
        return Document(id=document_id, collection=collection, body=body or {}, owner=owner)
    return _make
