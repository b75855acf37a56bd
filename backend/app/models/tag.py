"""
Memos Backend — Tag SQLAlchemy Model
=====================================

What:  ORM model for the `tag` table.
Why:   Tags are user-scoped labels; the (name, creator_id) pair is the
       natural key used by upsert and delete.
Who:   Read and written by SQLStore; Alembic tracks it for migrations.

Table Design:
    - Integer surrogate key, matching the rest of the memos schema
    - name: the label without the leading '#'
    - creator_id: owning user; users live in an external service, so no FK
    - uq_tag_name_creator: enforces one row per (name, creator)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Tag(Base):
    """
    A label owned by one user.

    Lifecycle:
        1. Created by POST /api/tag (upsert; re-posting an existing name is a no-op)
        2. Deleted by POST /api/tag/delete
        3. Never renamed
    """

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    creator_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    created_ts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        UniqueConstraint("name", "creator_id", name="uq_tag_name_creator"),
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}', creator_id={self.creator_id})>"
