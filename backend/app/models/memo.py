"""
Memos Backend — Memo SQLAlchemy Model
======================================

What:  ORM model for the `memo` table.
Why:   The suggestion endpoint scans memo content for hashtags.
Who:   Read by SQLStore.find_memo_list. This service never writes memos;
       they are created by the memo service that shares the database.

Only the columns the tag endpoints read are mapped here.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


# Row status values shared with the memo service
ROW_STATUS_NORMAL = "NORMAL"
ROW_STATUS_ARCHIVED = "ARCHIVED"


class Memo(Base):
    """A user's note. `content` is free text that may contain #tags."""

    __tablename__ = "memo"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # NORMAL or ARCHIVED; archived memos are ignored by suggestions
    row_status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=ROW_STATUS_NORMAL,
        server_default=text(f"'{ROW_STATUS_NORMAL}'"),
    )

    created_ts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Suggestions always filter by creator and status together
    __table_args__ = (
        Index("idx_memo_creator_status", "creator_id", "row_status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Memo(id={self.id}, creator_id={self.creator_id}, "
            f"row_status='{self.row_status}')>"
        )
