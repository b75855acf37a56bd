"""
Memos Backend — Database Session Management
============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Keeps connection and transaction handling out of the store and routes.
How:   One pooled async engine per process; one session per request that
       commits on success and rolls back on error.
Who:   `get_db_session` is consumed by the `get_store` dependency in app.store.
When:  Engine is created at module import; sessions are created per-request.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=settings.db_pool_pre_ping,
    pool_recycle=3600,
    # SQL echo is only useful while developing
    echo=settings.log_level == "DEBUG",
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: tag/memo attributes stay readable after commit,
# when the response is being built outside the transaction.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Every model registers with `Base.metadata`, which Alembic reads for
    autogenerate and tests use for `create_all`.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the factory
        2. Yields it to the request (via the store)
        3. Commits on success, rolls back on any error
        4. Always closes the session, returning the connection to the pool

    Raises:
        Whatever the handler raised; the rollback happens first so the
        global exception handlers see a clean session.
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


async def dispose_engine() -> None:
    """Closes every pooled connection. Called from the app lifespan on shutdown."""
    await engine.dispose()
