"""
Memos Backend — Activity SQLAlchemy Model
==========================================

What:  ORM model for the `activity` table (the user-facing audit trail).
Who:   Written by SQLStore.create_activity when a tag is created.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Activity(Base):
    """
    One recorded event.

    `payload` is a JSON document whose shape depends on `type`; for
    `tag.create` it is `{"tagName": "..."}`.
    """

    __tablename__ = "activity"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    creator_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    type: Mapped[str] = mapped_column(String(64), nullable=False)

    level: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default="INFO",
        server_default=text("'INFO'"),
    )

    payload: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="{}",
        server_default=text("'{}'"),
    )

    created_ts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, type='{self.type}', creator_id={self.creator_id})>"
