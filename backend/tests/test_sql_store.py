"""
Memos Backend — SQL Store Tests
================================

What:  SQLStore against a real (in-memory SQLite) database.
Why:   The in-memory fake used by the endpoint tests mirrors this contract;
       these tests pin down the real implementation of it.
"""

import json

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base
from app.exceptions import NotFoundError
from app.models.memo import ROW_STATUS_ARCHIVED, Memo
from app.schemas.activity import ActivityCreate
from app.schemas.tag import MemoFind, TagDelete, TagFind, TagUpsert
from app.store.sql_store import SQLStore


class TestSQLStoreTags:

    @pytest.mark.asyncio
    async def test_upsert_and_find(self, sql_session):
        store = SQLStore(sql_session)

        tag = await store.upsert_tag(TagUpsert(name="work", creator_id=1))
        await store.upsert_tag(TagUpsert(name="home", creator_id=1))
        await store.upsert_tag(TagUpsert(name="work", creator_id=2))

        assert tag.name == "work"
        assert tag.creator_id == 1
        tags = await store.find_tag_list(TagFind(creator_id=1))
        assert [t.name for t in tags] == ["work", "home"]

    @pytest.mark.asyncio
    async def test_upsert_twice_keeps_one_row(self, sql_session):
        store = SQLStore(sql_session)

        await store.upsert_tag(TagUpsert(name="work", creator_id=1))
        await store.upsert_tag(TagUpsert(name="work", creator_id=1))

        tags = await store.find_tag_list(TagFind(creator_id=1))
        assert len(tags) == 1

    @pytest.mark.asyncio
    async def test_delete(self, sql_session):
        store = SQLStore(sql_session)
        await store.upsert_tag(TagUpsert(name="work", creator_id=1))

        await store.delete_tag(TagDelete(name="work", creator_id=1))

        assert await store.find_tag_list(TagFind(creator_id=1)) == []

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, sql_session):
        store = SQLStore(sql_session)
        await store.upsert_tag(TagUpsert(name="work", creator_id=2))

        with pytest.raises(NotFoundError):
            await store.delete_tag(TagDelete(name="work", creator_id=1))


class TestSQLStoreMemos:

    @pytest.mark.asyncio
    async def test_find_memo_list_filters(self, sql_session):
        sql_session.add_all([
            Memo(creator_id=1, content="has #tag"),
            Memo(creator_id=1, content="no hashes here"),
            Memo(creator_id=1, content="#archived", row_status=ROW_STATUS_ARCHIVED),
            Memo(creator_id=2, content="#other user"),
        ])
        await sql_session.flush()
        store = SQLStore(sql_session)

        memos = await store.find_memo_list(
            MemoFind(creator_id=1, content_search="#", row_status="NORMAL")
        )

        assert [m.content for m in memos] == ["has #tag"]

    @pytest.mark.asyncio
    async def test_content_search_is_literal(self, sql_session):
        sql_session.add_all([
            Memo(creator_id=1, content="100% done"),
            Memo(creator_id=1, content="1000 done"),
        ])
        await sql_session.flush()
        store = SQLStore(sql_session)

        memos = await store.find_memo_list(MemoFind(content_search="0%"))

        assert [m.content for m in memos] == ["100% done"]


class TestSQLStoreActivity:

    @pytest.mark.asyncio
    async def test_create_activity(self, sql_session):
        store = SQLStore(sql_session)

        activity = await store.create_activity(
            ActivityCreate(creator_id=1, type="tag.create", payload='{"tagName": "work"}')
        )

        assert activity.id is not None
        assert activity.level == "INFO"
        assert json.loads(activity.payload) == {"tagName": "work"}


class TestSQLStoreConcurrentUpsert:
    """Two requests upserting the same tag, each in its own transaction."""

    @pytest_asyncio.fixture
    async def session_factory(self, tmp_path):
        # A file database so that the two sessions use separate connections
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/race.db")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_upsert_after_concurrent_commit(self, session_factory):
        """
        Request B has already looked at the tag list when request A inserts
        and commits the same tag; B's upsert must return that row, not fail
        on the unique constraint.
        """
        async with session_factory() as session_a, session_factory() as session_b:
            store_a = SQLStore(session_a)
            store_b = SQLStore(session_b)

            assert await store_b.find_tag_list(TagFind(creator_id=1)) == []

            await store_a.upsert_tag(TagUpsert(name="work", creator_id=1))
            await session_a.commit()

            tag = await store_b.upsert_tag(TagUpsert(name="work", creator_id=1))
            await session_b.commit()

        assert tag.name == "work"
        assert tag.creator_id == 1
        async with session_factory() as session:
            tags = await SQLStore(session).find_tag_list(TagFind(creator_id=1))
        assert len(tags) == 1
