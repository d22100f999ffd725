"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .post_tag import InMemoryPostTagRepository
from .review import InMemoryReviewRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryPostTagRepository",
    "InMemoryReviewRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
