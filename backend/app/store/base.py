"""
Memos Backend — Abstract Store Interface
=========================================

What:  Abstract base class defining the persistence contract the tag
       endpoints depend on.
Why:   Handlers and services never touch SQLAlchemy directly. Production
       wires in SQLStore; tests substitute an in-memory store through
       FastAPI's dependency overrides.
How:   Concrete stores inherit from Store and implement every method.
Who:   Called by TagService and ActivityService.

Contract:
    - Every method is a coroutine
    - Records are returned as pydantic models (TagRecord, MemoRecord,
      ActivityRecord), never as ORM objects
    - delete_tag raises NotFoundError when nothing matched; any other
      failure propagates as whatever the backend raised
    - Uniqueness of (name, creator_id) for tags is the store's job
"""

from abc import ABC, abstractmethod
from typing import List

from app.schemas.activity import ActivityCreate, ActivityRecord
from app.schemas.tag import (
    MemoFind,
    MemoRecord,
    TagDelete,
    TagFind,
    TagRecord,
    TagUpsert,
)


class Store(ABC):
    """Persistence operations for tags, memos and activities."""

    @abstractmethod
    async def upsert_tag(self, upsert: TagUpsert) -> TagRecord:
        """
        Insert the tag, or return the existing one with the same
        (name, creator_id). Calling it twice never creates a duplicate.
        """
        ...

    @abstractmethod
    async def find_tag_list(self, find: TagFind) -> List[TagRecord]:
        """All tags owned by `find.creator_id`, in insertion order."""
        ...

    @abstractmethod
    async def delete_tag(self, tag_delete: TagDelete) -> None:
        """
        Delete the tag identified by (name, creator_id).

        Raises:
            NotFoundError: No such tag for this creator.
        """
        ...

    @abstractmethod
    async def find_memo_list(self, find: MemoFind) -> List[MemoRecord]:
        """Memos matching every set field of `find`."""
        ...

    @abstractmethod
    async def create_activity(self, create: ActivityCreate) -> ActivityRecord:
        ...
