"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.post_tag import PostgresPostTagRepository
from blog.persistence.repository.review import PostgresReviewRepository
from blog.persistence.repository.tag import PostgresTagRepository
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresTagRepository",
    "PostgresReviewRepository",
    "PostgresPostTagRepository",
]
