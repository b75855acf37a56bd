"""
Memos Backend — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the test suite.
How:   Environment overrides are applied before any `app` import so the
       settings singleton and the engine pick up the test database.

Fixtures:
    memory_store:  In-memory Store implementation (no database)
    test_client:   HTTPX AsyncClient against the app, with get_store
                   overridden to return memory_store
    auth_headers:  Headers authenticating as user 1
    sql_session:   AsyncSession on a fresh in-memory SQLite database
"""

import os
import tempfile
from itertools import count
from typing import Dict, List, Tuple

# Must run before app.config is imported anywhere
_TEST_DIR = tempfile.mkdtemp(prefix="memos_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["USER_ID_HEADER"] = "X-User-ID"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.exceptions import NotFoundError
from app.models.memo import ROW_STATUS_NORMAL
from app.schemas.activity import ActivityCreate, ActivityRecord
from app.schemas.tag import (
    MemoFind,
    MemoRecord,
    TagDelete,
    TagFind,
    TagRecord,
    TagUpsert,
)
from app.store import Store, get_store


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Store
# ══════════════════════════════════════════════════════════════════════════

class InMemoryStore(Store):
    """
    Dict-backed Store with the same contract as SQLStore.

    Tags keep insertion order (dicts are ordered), which is what
    find_tag_list promises.
    """

    def __init__(self):
        self.tags: Dict[Tuple[int, str], TagRecord] = {}
        self.memos: List[MemoRecord] = []
        self.activities: List[ActivityRecord] = []
        self._ids = count(1)

    def add_memo(self, creator_id: int, content: str, row_status: str = ROW_STATUS_NORMAL) -> MemoRecord:
        memo = MemoRecord(
            id=next(self._ids),
            creator_id=creator_id,
            content=content,
            row_status=row_status,
        )
        self.memos.append(memo)
        return memo

    async def upsert_tag(self, upsert: TagUpsert) -> TagRecord:
        key = (upsert.creator_id, upsert.name)
        if key not in self.tags:
            self.tags[key] = TagRecord(name=upsert.name, creator_id=upsert.creator_id)
        return self.tags[key]

    async def find_tag_list(self, find: TagFind) -> List[TagRecord]:
        return [tag for tag in self.tags.values() if tag.creator_id == find.creator_id]

    async def delete_tag(self, tag_delete: TagDelete) -> None:
        key = (tag_delete.creator_id, tag_delete.name)
        if key not in self.tags:
            raise NotFoundError(resource="tag", resource_id=tag_delete.name)
        del self.tags[key]

    async def find_memo_list(self, find: MemoFind) -> List[MemoRecord]:
        result = []
        for memo in self.memos:
            if find.creator_id is not None and memo.creator_id != find.creator_id:
                continue
            if find.row_status is not None and memo.row_status != find.row_status:
                continue
            if find.content_search is not None and find.content_search not in memo.content:
                continue
            result.append(memo)
        return result

    async def create_activity(self, create: ActivityCreate) -> ActivityRecord:
        activity = ActivityRecord(id=next(self._ids), **create.model_dump())
        self.activities.append(activity)
        return activity


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def auth_headers():
    return {"X-User-ID": "1"}


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    The Store dependency is replaced by `memory_store`, so endpoint tests
    can seed and inspect state without a database.
    """
    from app.main import app

    app.dependency_overrides[get_store] = lambda: memory_store
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_session():
    """
    AsyncSession on a private in-memory SQLite database with all tables.

    StaticPool keeps the single connection alive; otherwise each new
    connection would see an empty :memory: database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
