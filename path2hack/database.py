"""
Path2Hack Backend: Database Session Management
===============================================

What:  The async engine, the session factory and the per-request session dependency.
Why:   One process-wide connection pool, created before the listener accepts
       traffic, with an isolated session handed to every request.
How:   Handlers receive their session through `Depends(get_db_session)`, so tests
       swap in their own database via `app.dependency_overrides`.

Uniqueness:
    `users.email` and `projects.project_name` carry unique indexes. Services insert
    directly and treat an IntegrityError as "already exists", which closes the race
    a separate existence check would leave open.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from path2hack.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=settings.db_pool_pre_ping,
    pool_recycle=3600,

    # Echo SQL queries in DEBUG mode only
    echo=settings.log_level == "DEBUG",
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after the request commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Declarative base for User and Project; Alembic reads Base.metadata.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Per-request session: committed when the handler returns, rolled back and
    re-raised when it raises, closed either way.

    Example usage in a route:
        @router.post("/register")
        async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan on shutdown."""
    await engine.dispose()
