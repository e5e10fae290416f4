"""SQLAlchemy table definitions for dikenang.

These table definitions are used with SQLAlchemy Core and the manual
mappers in ``dikenang.persistence.mappers``. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("relationship_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("caption", Text, nullable=False),
    Column("type", String(50), nullable=False, server_default="public"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("attachment_id", UUID, nullable=True),
    Column("relationship_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# POST_VOTES TABLE (vote membership)
# ============================================================================
# One row per (post, user): a user holds either an upvote or a downvote
post_votes_table = Table(
    "post_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "kind",
        Enum("upvote", "downvote", name="vote_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_votes_post_user"),
)

Index(
    "idx_post_votes_post_kind",
    post_votes_table.c.post_id,
    post_votes_table.c.kind,
    post_votes_table.c.created_at,
)
Index("idx_post_votes_user_id", post_votes_table.c.user_id)

# ============================================================================
# POST_REACHES TABLE
# ============================================================================
post_reaches_table = Table(
    "post_reaches",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_reaches_post_user"),
)
