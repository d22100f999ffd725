"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    false,
)

# Metadata object for all tables
metadata = MetaData()

# Integer identity on PostgreSQL, rowid alias on SQLite
Identifier = BigInteger().with_variant(Integer, "sqlite")


def _envelope() -> list[Column]:
    """Soft-delete columns carried by every entity table."""
    return [
        Column("created_at", DateTime, nullable=False),
        Column("updated_at", DateTime, nullable=False),
        Column("deleted_at", DateTime, nullable=True),
        Column("is_deleted", Boolean, nullable=False, server_default=false()),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("username", String(12), nullable=False),
    Column("first_name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("email", String(255), nullable=False),
    Column("password", Text, nullable=True),  # Credential hash, never plaintext
    *_envelope(),
    UniqueConstraint("username", name="uq_users_username"),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("author_id", Identifier, ForeignKey("users.id"), nullable=False),
    Column("title", String(50), nullable=False),
    Column("body", Text, nullable=False),
    *_envelope(),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),  # Upper-cased at creation
    *_envelope(),
    UniqueConstraint("name", name="uq_tags_name"),
)

# ============================================================================
# POST_TAGS TABLE (Many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", Identifier, ForeignKey("posts.id"), primary_key=True),
    Column("tag_id", Identifier, ForeignKey("tags.id"), primary_key=True),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("post_id", Identifier, ForeignKey("posts.id"), nullable=False),
    Column("user_id", Identifier, ForeignKey("users.id"), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "parent_comment_id", Identifier, ForeignKey("comments.id"), nullable=True
    ),
    *_envelope(),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# REVIEWS TABLE
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", Identifier, primary_key=True, autoincrement=True),
    Column("post_id", Identifier, ForeignKey("posts.id"), nullable=False),
    Column("user_id", Identifier, ForeignKey("users.id"), nullable=False),
    Column("rate", String(10), nullable=False),  # ONE..FIVE
    *_envelope(),
)

Index("idx_reviews_post_id", reviews_table.c.post_id)
Index("idx_reviews_user_id", reviews_table.c.user_id)
