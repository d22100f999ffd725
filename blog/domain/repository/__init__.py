"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.base import EntityRepository
from blog.domain.repository.comment import CommentColumn, CommentRepository
from blog.domain.repository.post import PostColumn, PostRepository
from blog.domain.repository.post_tag import PostTagRepository
from blog.domain.repository.review import ReviewColumn, ReviewRepository
from blog.domain.repository.tag import TagColumn, TagRepository
from blog.domain.repository.user import UserColumn, UserRepository

__all__ = [
    "EntityRepository",
    "UserRepository",
    "UserColumn",
    "PostRepository",
    "PostColumn",
    "CommentRepository",
    "CommentColumn",
    "TagRepository",
    "TagColumn",
    "ReviewRepository",
    "ReviewColumn",
    "PostTagRepository",
]
