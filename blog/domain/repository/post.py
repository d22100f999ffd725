"""Post repository interface."""

from abc import ABC
from enum import Enum

from blog.domain.model.post import Post
from blog.domain.repository.base import EntityRepository
from blog.domain.value import PostId


class PostColumn(str, Enum):
    """Columns posts can be looked up by."""

    AUTHOR_ID = "author_id"
    TITLE = "title"


class PostRepository(EntityRepository[Post, PostId, PostColumn], ABC):
    """Repository interface for the Post aggregate."""

    resource = "post"
