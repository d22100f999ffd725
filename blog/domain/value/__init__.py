"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    CommentId,
    PostId,
    ReviewId,
    TagId,
    UserId,
)
from blog.domain.value.types import (
    DEFAULT_PAGE_SIZE,
    Pagination,
    Rate,
    TagName,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "TagId",
    "ReviewId",
    # Types
    "DEFAULT_PAGE_SIZE",
    "Pagination",
    "Rate",
    "TagName",
]
