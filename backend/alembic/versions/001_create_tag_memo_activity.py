"""Create tag, memo and activity tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial schema for the tag endpoints.
       - tag: user-scoped labels, unique per (name, creator_id)
       - memo: read by the suggestion endpoint (owned by the memo service)
       - activity: audit trail, receives tag.create events

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "memo",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "row_status",
            sa.String(32),
            nullable=False,
            server_default=sa.text("'NORMAL'"),
            comment="NORMAL or ARCHIVED",
        ),
        sa.Column(
            "created_ts",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_memo_creator_status", "memo", ["creator_id", "row_status"])

    op.create_table(
        "tag",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_ts",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", "creator_id", name="uq_tag_name_creator"),
    )
    op.create_index("ix_tag_creator_id", "tag", ["creator_id"])

    op.create_table(
        "activity",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(64), nullable=False),
        sa.Column("level", sa.String(16), nullable=False, server_default=sa.text("'INFO'")),
        sa.Column("payload", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column(
            "created_ts",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_activity_creator_id", "activity", ["creator_id"])


def downgrade() -> None:
    op.drop_index("ix_activity_creator_id", table_name="activity")
    op.drop_table("activity")
    op.drop_index("ix_tag_creator_id", table_name="tag")
    op.drop_table("tag")
    op.drop_index("idx_memo_creator_status", table_name="memo")
    op.drop_table("memo")
