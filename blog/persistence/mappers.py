"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from blog.domain.model import Comment, Post, Review, Tag, User
from blog.domain.model.common import SoftDeletableModel
from blog.domain.value import CommentId, PostId, Rate, ReviewId, TagId, UserId


def _envelope(row: Dict[str, Any]) -> Dict[str, Any]:
    """Extract the soft-delete columns shared by every table."""
    return {
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
        "deleted_at": row.get("deleted_at"),
        "is_deleted": bool(row.get("is_deleted", False)),
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model (password hash included)
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        email=row["email"],
        password=row.get("password"),
        **_envelope(row),
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["author_id"]),
        title=row["title"],
        body=row["body"],
        **_envelope(row),
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(id=TagId(row["id"]), name=row["name"], **_envelope(row))


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        body=row["body"],
        parent_comment_id=CommentId(row["parent_comment_id"])
        if row.get("parent_comment_id") is not None
        else None,
        **_envelope(row),
    )


def row_to_review(row: Dict[str, Any]) -> Review:
    """Convert database row to Review domain model."""
    return Review(
        id=ReviewId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        rate=Rate(row["rate"]),
        **_envelope(row),
    )


def entity_to_dict(entity: SoftDeletableModel) -> Dict[str, Any]:
    """Convert a domain model to a database dict.

    The id is left out so the database generates it; enums are stored by
    value.

    Args:
        entity: Domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return entity.model_dump(mode="python", exclude={"id"})


def review_to_dict(review: Review) -> Dict[str, Any]:
    """Convert Review domain model to database dict."""
    data = entity_to_dict(review)
    data["rate"] = review.rate.value
    return data
