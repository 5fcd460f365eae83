"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (in-memory DB, repositories, API client).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── db_engine: In-memory SQLite engine with the notes table created
    ├── session_factory: async_sessionmaker bound to db_engine
    ├── db_session: One AsyncSession for repository tests
    ├── repository: SqlNoteRepository over db_session
    ├── mock_repository: AsyncMock standing in for NoteRepository (service unit tests)
    └── test_client: HTTPX AsyncClient talking to a fresh app backed by db_engine
"""

import os

# Override settings for testing BEFORE any notes_api imports
# Why: The module-level engine is built from DATABASE_URL at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notes_api.database import create_tables, get_db_session
from notes_api.repositories import NoteRepository, SqlNoteRepository
from notes_api.schemas.note import Note


@pytest_asyncio.fixture
async def db_engine():
    """
    Provides a fresh in-memory SQLite database per test.

    StaticPool keeps the single :memory: connection alive across sessions,
    so data written by one request is visible to the next.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session) -> SqlNoteRepository:
    return SqlNoteRepository(db_session)


@pytest.fixture
def mock_repository():
    """
    Provides a mock NoteRepository.

    Usage:
        async def test_get_note(mock_repository):
            mock_repository.find_by_id.return_value = note
            result = await note_service.get_note(mock_repository, note.id)
    """
    repo = AsyncMock(spec=NoteRepository)
    repo.find_all = AsyncMock(return_value=[])
    repo.find_by_id = AsyncMock(return_value=None)
    repo.save = AsyncMock()
    repo.delete_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def sample_note():
    """A stored note as the repository would return it."""
    return Note(
        id="3f2b6c1e-8a4d-4e8b-9a51-0c7d2e1f4b6a",
        description="Buy milk",
        date_time=datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    )


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    How: Builds a fresh app, swaps the session dependency for one bound to the
         in-memory database, and routes requests through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    from notes_api.main import create_app

    async def _test_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = _test_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
