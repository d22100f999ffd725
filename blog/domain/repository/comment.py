"""Comment repository interface."""

from abc import ABC
from enum import Enum

from blog.domain.model.comment import Comment
from blog.domain.repository.base import EntityRepository
from blog.domain.value import CommentId


class CommentColumn(str, Enum):
    """Columns comments can be looked up by."""

    POST_ID = "post_id"
    USER_ID = "user_id"
    PARENT_COMMENT_ID = "parent_comment_id"


class CommentRepository(EntityRepository[Comment, CommentId, CommentColumn], ABC):
    """Repository for Comment entity.

    Threading is not resolved here: callers get flat rows and build the
    tree themselves.
    """

    resource = "comment"
