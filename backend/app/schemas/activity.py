"""
Memos Backend — Activity Schemas
=================================

What:  Pydantic models for recording activities through the Store.
"""

from pydantic import BaseModel, ConfigDict, Field


ACTIVITY_TAG_CREATE = "tag.create"

ACTIVITY_LEVEL_INFO = "INFO"


class ActivityTagCreatePayload(BaseModel):
    """
    JSON payload stored with a `tag.create` activity.

    Serialized with camelCase keys (`{"tagName": "..."}`) so that it reads
    the same as payloads written by the rest of the memos services.
    """
    tag_name: str = Field(alias="tagName")

    model_config = ConfigDict(populate_by_name=True)


class ActivityCreate(BaseModel):
    creator_id: int
    type: str
    level: str = ACTIVITY_LEVEL_INFO
    payload: str = "{}"


class ActivityRecord(BaseModel):
    id: int
    creator_id: int
    type: str
    level: str
    payload: str

    model_config = {"from_attributes": True}
