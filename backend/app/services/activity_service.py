"""
Memos Backend — Activity Service
=================================

What:  Records audit activities through the Store.
Why:   Payload serialization and the "no activity recorded" check live in
       one place instead of in every handler that emits an event.
Who:   Called by TagService after a successful tag upsert.
"""

import logging

from app.exceptions import ActivityError
from app.schemas.activity import (
    ACTIVITY_LEVEL_INFO,
    ACTIVITY_TAG_CREATE,
    ActivityCreate,
    ActivityRecord,
    ActivityTagCreatePayload,
)
from app.schemas.tag import TagRecord
from app.store.base import Store

logger = logging.getLogger(__name__)


class ActivityService:
    """Stateless; the Store is passed on every call."""

    async def create_tag_create_activity(self, store: Store, tag: TagRecord) -> ActivityRecord:
        """
        Record a `tag.create` activity for `tag`.

        Raises:
            ActivityError: The store failed or returned no activity. The
                original exception, if any, is chained as the cause.
        """
        payload = ActivityTagCreatePayload(tag_name=tag.name)
        try:
            activity = await store.create_activity(
                ActivityCreate(
                    creator_id=tag.creator_id,
                    type=ACTIVITY_TAG_CREATE,
                    level=ACTIVITY_LEVEL_INFO,
                    payload=payload.model_dump_json(by_alias=True),
                )
            )
        except Exception as e:
            logger.error(
                "Failed to create %s activity for user %d: %s",
                ACTIVITY_TAG_CREATE,
                tag.creator_id,
                str(e),
            )
            raise ActivityError(
                context={"type": ACTIVITY_TAG_CREATE, "error_type": type(e).__name__},
            ) from e

        if activity is None:
            raise ActivityError(context={"type": ACTIVITY_TAG_CREATE})
        return activity


activity_service = ActivityService()
