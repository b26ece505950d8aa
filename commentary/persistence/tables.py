"""SQLAlchemy table definitions for commentary.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# Posts and users live in other services; post_id and author_id are plain
# references without foreign keys.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    # Kept after tombstoning, so no cascade
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    Column("body", Text, nullable=False, server_default=""),
    Column("summary", Text, nullable=False, server_default=""),
    Column(
        "children", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    Column(
        "detached_children",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    # Sets stored as arrays; element order carries no meaning
    Column("likes", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "dislikes", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint("version >= 0", name="version_non_negative"),
    CheckConstraint(
        "NOT deleted OR (body = '' AND summary = '' AND cardinality(children) = 0)",
        name="tombstone_cleared",
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
