"""
Memos Backend — Tag & Memo Schemas
===================================

What:  Pydantic models for tag request bodies, store queries and the
       storage-agnostic records the store returns.
Why:   The Store interface must not leak ORM objects; any implementation
       (SQL, in-memory for tests) speaks these types.

Request bodies vs store commands:
    TagUpsertRequest / TagDeleteRequest are what the client sends (name only).
    TagUpsert / TagDelete add the creator taken from the authenticated user,
    so a client can never act on another user's tags.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.memo import ROW_STATUS_NORMAL


# ══════════════════════════════════════════════════════════════════════════
# Request Bodies
# ══════════════════════════════════════════════════════════════════════════


class _TagNameBody(BaseModel):
    """
    Shared decoding rules for the tag request bodies.

    A JSON `null` body and a `null` or missing name all decode to name "",
    so they are answered with "Tag name shouldn't be empty" rather than
    "Malformed post tag request". Wrong types (a number, an array) are still
    malformed.
    """
    name: str = Field(default="")

    @model_validator(mode="before")
    @classmethod
    def null_body_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("name", mode="before")
    @classmethod
    def null_name_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class TagUpsertRequest(_TagNameBody):
    """Body of POST /api/tag."""
    name: str = Field(default="", description="Tag name without the leading '#'")


class TagDeleteRequest(_TagNameBody):
    """Body of POST /api/tag/delete."""
    name: str = Field(default="", description="Name of the tag to delete")


# ══════════════════════════════════════════════════════════════════════════
# Store Commands & Queries
# ══════════════════════════════════════════════════════════════════════════


class TagUpsert(BaseModel):
    name: str
    creator_id: int


class TagDelete(BaseModel):
    name: str
    creator_id: int


class TagFind(BaseModel):
    creator_id: int


class MemoFind(BaseModel):
    """
    Memo filter. Unset fields do not constrain the result.

    content_search: substring the memo content must contain
    """
    creator_id: Optional[int] = None
    content_search: Optional[str] = None
    row_status: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Records Returned by the Store
# ══════════════════════════════════════════════════════════════════════════


class TagRecord(BaseModel):
    name: str
    creator_id: int

    model_config = {"from_attributes": True}


class MemoRecord(BaseModel):
    id: int
    creator_id: int
    content: str
    row_status: str = ROW_STATUS_NORMAL

    model_config = {"from_attributes": True}
