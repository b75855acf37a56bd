"""
Memos Backend — Tag Service
============================

What:  Business logic behind the four tag endpoints.
Why:   Keeps validation, store error translation and the suggestion
       algorithm testable without HTTP.
How:   Each method receives the Store and the caller's user id, validates,
       delegates to the store, and translates failures into MemosError
       subclasses that the global handlers render.
Who:   Called by app/routes/tag.py.

Error translation:
    empty name              → ValidationError  (400)
    store NotFoundError     → NotFoundError    (404, delete only)
    any other store failure → DatabaseError    (500)
    activity failure        → ActivityError    (500)

Suggestion flow (GET /api/tag/suggestion):
    ┌──────────────┐   ┌──────────────┐   ┌──────────────┐   ┌──────────┐
    │ NORMAL memos │──▶│ extract #tags│──▶│ drop existing│──▶│  sort    │
    │ containing # │   │ per memo     │   │ tag names    │   │  unique  │
    └──────────────┘   └──────────────┘   └──────────────┘   └──────────┘
"""

import logging
from typing import List

from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.models.memo import ROW_STATUS_NORMAL
from app.schemas.tag import MemoFind, TagDelete, TagFind, TagRecord, TagUpsert
from app.services.activity_service import activity_service
from app.services.tag_extractor import find_tag_list_from_memo_content
from app.store.base import Store

logger = logging.getLogger(__name__)


class TagService:
    """
    Stateless service for user-scoped tags.

    Responsibilities:
        - upsert_tag(): create-or-keep a tag and record the activity
        - list_tag_names(): names of the caller's tags
        - suggest_tags(): hashtags used in memos but not yet registered
        - delete_tag(): remove a tag, distinguishing not-found
    """

    async def upsert_tag(self, store: Store, user_id: int, name: str) -> TagRecord:
        """
        Create the tag if it does not exist yet and log a `tag.create` activity.

        Args:
            store: Persistence backend
            user_id: Authenticated caller; becomes the tag's creator
            name: Tag name from the request body

        Returns:
            The stored tag

        Raises:
            ValidationError: `name` is empty
            DatabaseError: The upsert failed
            ActivityError: The activity could not be recorded
        """
        if name == "":
            raise ValidationError(message="Tag name shouldn't be empty", field="name")

        try:
            tag = await store.upsert_tag(TagUpsert(name=name, creator_id=user_id))
        except Exception as e:
            logger.error("Failed to upsert tag %r for user %d: %s", name, user_id, str(e))
            raise DatabaseError(
                message="Failed to upsert tag",
                context={"error_type": type(e).__name__},
            ) from e

        await activity_service.create_tag_create_activity(store, tag)
        logger.info("Tag %r upserted for user %d", tag.name, user_id)
        return tag

    async def list_tag_names(self, store: Store, user_id: int) -> List[str]:
        """Names of the caller's tags, in the order the store returns them."""
        tags = await self._find_tags(store, user_id)
        return [tag.name for tag in tags]

    async def suggest_tags(self, store: Store, user_id: int) -> List[str]:
        """
        Hashtags found in the caller's memos that are not registered tags.

        Only NORMAL (non-archived) memos containing '#' are scanned. The result
        is deduplicated across memos and sorted ascending.

        Raises:
            DatabaseError: Loading memos or existing tags failed
        """
        memo_find = MemoFind(
            creator_id=user_id,
            content_search="#",
            row_status=ROW_STATUS_NORMAL,
        )
        try:
            memos = await store.find_memo_list(memo_find)
        except Exception as e:
            logger.error("Failed to find memo list for user %d: %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to find memo list",
                context={"error_type": type(e).__name__},
            ) from e

        existing = {tag.name for tag in await self._find_tags(store, user_id)}

        suggestions = set()
        for memo in memos:
            for name in find_tag_list_from_memo_content(memo.content):
                if name not in existing:
                    suggestions.add(name)

        logger.debug(
            "Scanned %d memos for user %d: %d suggestions",
            len(memos),
            user_id,
            len(suggestions),
        )
        return sorted(suggestions)

    async def delete_tag(self, store: Store, user_id: int, name: str) -> None:
        """
        Delete the caller's tag called `name`.

        Raises:
            ValidationError: `name` is empty
            NotFoundError: The caller has no such tag
            DatabaseError: Any other store failure
        """
        if name == "":
            raise ValidationError(message="Tag name shouldn't be empty", field="name")

        try:
            await store.delete_tag(TagDelete(name=name, creator_id=user_id))
        except NotFoundError as e:
            raise NotFoundError(
                message=f"Tag name not found: {name}",
                resource="tag",
                resource_id=name,
            ) from e
        except Exception as e:
            logger.error("Failed to delete tag %r for user %d: %s", name, user_id, str(e))
            raise DatabaseError(
                message=f"Failed to delete tag name: {name}",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Tag %r deleted for user %d", name, user_id)

    async def _find_tags(self, store: Store, user_id: int) -> List[TagRecord]:
        try:
            return await store.find_tag_list(TagFind(creator_id=user_id))
        except Exception as e:
            logger.error("Failed to find tag list for user %d: %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to find tag list",
                context={"error_type": type(e).__name__},
            ) from e


# ── Singleton Instance ────────────────────────────────────────────────────
tag_service = TagService()
