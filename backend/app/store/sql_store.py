"""
Memos Backend — SQL Store Implementation
=========================================

What:  Store backed by async SQLAlchemy.
Why:   The production persistence layer (PostgreSQL via asyncpg; SQLite via
       aiosqlite in tests).
How:   Wraps the request's AsyncSession. Writes are flushed, not committed;
       get_db_session commits once the whole request succeeded.
Who:   Built per request by the `get_store` dependency.

Query plans:
    upsert_tag:     INSERT ... ON CONFLICT (name, creator_id) DO NOTHING, then SELECT
                    → uq_tag_name_creator
    find_tag_list:  WHERE creator_id = :id ORDER BY id
                    → ix_tag_creator_id
    find_memo_list: WHERE creator_id = :id AND row_status = :s AND content LIKE '%#%'
                    → idx_memo_creator_status, then filter on content
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.activity import Activity
from app.models.memo import Memo
from app.models.tag import Tag
from app.schemas.activity import ActivityCreate, ActivityRecord
from app.schemas.tag import (
    MemoFind,
    MemoRecord,
    TagDelete,
    TagFind,
    TagRecord,
    TagUpsert,
)
from app.store.base import Store

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT support
_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLStore(Store):
    """Store over a single AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert_tag(self, upsert: TagUpsert) -> TagRecord:
        # INSERT ... ON CONFLICT DO NOTHING, then read the row back. Two
        # requests racing on the same (name, creator_id) both end up with the
        # one stored row instead of the loser hitting uq_tag_name_creator.
        dialect = self.session.get_bind().dialect.name
        insert = _INSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Tag upsert is not supported on dialect '{dialect}'")

        result = await self.session.execute(
            insert(Tag)
            .values(name=upsert.name, creator_id=upsert.creator_id)
            .on_conflict_do_nothing(index_elements=["name", "creator_id"])
        )
        if result.rowcount:
            logger.debug("Inserted tag %r for user %d", upsert.name, upsert.creator_id)

        tag = (
            await self.session.execute(
                select(Tag).where(
                    Tag.name == upsert.name,
                    Tag.creator_id == upsert.creator_id,
                )
            )
        ).scalar_one()
        return TagRecord.model_validate(tag)

    async def find_tag_list(self, find: TagFind) -> List[TagRecord]:
        result = await self.session.execute(
            select(Tag).where(Tag.creator_id == find.creator_id).order_by(Tag.id)
        )
        return [TagRecord.model_validate(tag) for tag in result.scalars().all()]

    async def delete_tag(self, tag_delete: TagDelete) -> None:
        result = await self.session.execute(
            delete(Tag).where(
                Tag.name == tag_delete.name,
                Tag.creator_id == tag_delete.creator_id,
            )
        )
        if result.rowcount == 0:
            raise NotFoundError(resource="tag", resource_id=tag_delete.name)

    async def find_memo_list(self, find: MemoFind) -> List[MemoRecord]:
        query = select(Memo)
        if find.creator_id is not None:
            query = query.where(Memo.creator_id == find.creator_id)
        if find.row_status is not None:
            query = query.where(Memo.row_status == find.row_status)
        if find.content_search is not None:
            # contains() with autoescape treats % and _ in the search literally
            query = query.where(Memo.content.contains(find.content_search, autoescape=True))
        query = query.order_by(Memo.created_ts.desc(), Memo.id.desc())

        result = await self.session.execute(query)
        return [MemoRecord.model_validate(memo) for memo in result.scalars().all()]

    async def create_activity(self, create: ActivityCreate) -> ActivityRecord:
        activity = Activity(
            creator_id=create.creator_id,
            type=create.type,
            level=create.level,
            payload=create.payload,
        )
        self.session.add(activity)
        await self.session.flush()
        return ActivityRecord.model_validate(activity)
