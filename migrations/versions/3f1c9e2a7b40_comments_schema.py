"""comments_schema

Create the comment store:
- Comments and replies in one table, linked by parent_id and an ordered
  children array
- Tombstones (deleted=true) keep the row with content cleared
- Likes and dislikes as arrays of user IDs
- version column for optimistic locking

Revision ID: 3f1c9e2a7b40
Revises:
Create Date: 2026-10-18 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9e2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_array(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.ARRAY(sa.UUID()),
        nullable=False,
        server_default=sa.text("'{}'"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("body", sa.Text(), nullable=False, server_default=""),
        sa.Column("summary", sa.Text(), nullable=False, server_default=""),
        _uuid_array("children"),
        _uuid_array("detached_children"),
        _uuid_array("likes"),
        _uuid_array("dislikes"),
        sa.Column(
            "deleted", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("version >= 0", name="version_non_negative"),
        sa.CheckConstraint(
            "NOT deleted OR (body = '' AND summary = '' AND cardinality(children) = 0)",
            name="tombstone_cleared",
        ),
    )

    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_author_id", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_table("comments")
