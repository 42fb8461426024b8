"""
Path2Hack Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment is pointed at throwaway values BEFORE path2hack is imported,
       then each test gets a fresh in-memory SQLite database and mocked outbound
       clients, injected into the app through dependency_overrides.

Fixture Hierarchy (all function-scoped):
    ├── db_engine / session_factory / db_session: in-memory sqlite+aiosqlite
    ├── mock_llm:      LLMService double (generate_text returns canned text)
    ├── mock_fetcher:  PageFetcher double
    ├── mock_github:   GitHubService double
    ├── upload_store:  FileService writing into tmp_path
    └── test_client:   HTTPX AsyncClient talking to the ASGI app
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="path2hack_test_")
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from path2hack.database import Base, get_db_session
from path2hack.models.project import Project  # noqa: F401
from path2hack.models.user import User  # noqa: F401
from path2hack.services.file_service import FileService, get_file_service
from path2hack.services.gemini_service import get_llm_service
from path2hack.services.github_service import GitHubService, get_github_service
from path2hack.services.llm_base import LLMService
from path2hack.services.scrape_service import PageFetcher, get_page_fetcher


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite with the real schema (including the unique indexes).

    StaticPool keeps one connection, so every session sees the same database.
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
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Outbound collaborators
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_llm():
    """
    Model client double.

    Usage:
        mock_llm.generate_text.return_value = "Rating (1-10): 9"
        prompt = mock_llm.generate_text.await_args.args[0]
    """
    llm = MagicMock(spec=LLMService)
    llm.generate_text = AsyncMock(return_value="Generated text")
    llm.health_check = AsyncMock(return_value=True)
    return llm


@pytest.fixture
def mock_fetcher():
    fetcher = MagicMock(spec=PageFetcher)
    fetcher.fetch = AsyncMock(return_value="<html><body><h1>Demo</h1></body></html>")
    return fetcher


@pytest.fixture
def mock_github():
    github = MagicMock(spec=GitHubService)
    github.get_languages = AsyncMock(return_value=["Python", "TypeScript"])
    return github


@pytest.fixture
def upload_store(tmp_path):
    return FileService(upload_dir=str(tmp_path / "uploads"))


# ══════════════════════════════════════════════════════════════════════════
# HTTP client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory, mock_llm, mock_fetcher, mock_github, upload_store):
    """
    HTTPX AsyncClient routed straight into the FastAPI app (no server, no lifespan).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from path2hack.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_llm_service] = lambda: mock_llm
    app.dependency_overrides[get_page_fetcher] = lambda: mock_fetcher
    app.dependency_overrides[get_github_service] = lambda: mock_github
    app.dependency_overrides[get_file_service] = lambda: upload_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
