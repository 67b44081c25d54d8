"""
Board Backend — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throwaway SQLite file and upload
       directory BEFORE any `board` module is imported, since settings,
       the engine and the image service are created at import time.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine: engine with the schema created, dropped afterwards
    ├── session_factory: builds independent sessions on that schema
    ├── db_session: one open session for service-level tests
    ├── mock_db_session: AsyncMock standing in for AsyncSession
    ├── temp_storage: temporary upload directory
    ├── sample_image_bytes: small PNG payload
    ├── sample_post_data: camelCase post body as the frontend sends it
    └── test_client: HTTPX AsyncClient bound to the FastAPI app
"""

import os
import tempfile

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

_TEST_ROOT = tempfile.mkdtemp(prefix="board_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_ROOT, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import board.models  # noqa: E402,F401
from board.database import Base, async_session_factory, engine  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """Create every table before the test and drop them afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """
    Session factory on the test schema.

    Tests that check persistence write in one session, commit, and read
    back in a fresh one so the identity map cannot mask the database.
    """
    return async_session_factory


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_vote_rejected(mock_db_session):
            with pytest.raises(InvalidInputError):
                await post_service.vote(mock_db_session, "p1", 2)
            mock_db_session.get.assert_not_awaited()
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Data Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def temp_storage(tmp_path):
    storage_dir = tmp_path / "uploads"
    storage_dir.mkdir()
    return str(storage_dir)


@pytest.fixture
def sample_image_bytes():
    """PNG signature followed by an IHDR chunk header; enough to look like a PNG."""
    return (
        b"\x89PNG\r\n\x1a\n"
        b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00"
        b"\x90wS\xde"
    )


@pytest.fixture
def sample_post_data():
    """A post body shaped like the frontend's addPost payload."""
    return {
        "id": str(uuid4()),
        "title": "First post",
        "content": "Hello board",
        "author": "Anon #4521",
        "category": "General",
        "upvotes": 0,
        "createdAt": "2024-01-15T12:00:00.000Z",
        "comments": [],
    }


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    ASGITransport does not run the lifespan; the schema comes from
    db_engine and the upload directory from ImageService construction.
    """
    from board.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
