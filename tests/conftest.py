"""Test configuration and fixtures."""

import logfire
import pytest

from blog.domain.model import Comment, Review
from blog.domain.value import CommentId, PostId, Rate, ReviewId, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    post_id: int = 1,
    user_id: int = 1,
    **overrides,
) -> Comment:
    """Helper function to build a stored-looking comment for tree tests."""
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        user_id=UserId(user_id),
        body=overrides.pop("body", f"comment {comment_id}"),
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        **overrides,
    )


def make_review(rate: Rate, review_id: int = 1, **overrides) -> Review:
    """Helper function to build a stored-looking review."""
    return Review(
        id=ReviewId(review_id),
        post_id=PostId(overrides.pop("post_id", 1)),
        user_id=UserId(overrides.pop("user_id", review_id)),
        rate=rate,
        **overrides,
    )


@pytest.fixture
def user_data() -> dict:
    """Registration fields of a valid account."""
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "s3cret-pass",
        "first_name": "Alice",
        "last_name": "Liddell",
    }
