"""Comment entity.

Comments are threaded discussions on posts. Threading is a plain
parent reference: ``parent_comment_id`` is None for top-level comments.
"""

from typing import Optional

from pydantic import Field

from blog.domain.model.common import SoftDeletableModel
from blog.domain.value import CommentId, PostId, UserId


class Comment(SoftDeletableModel):
    """Comment entity.

    A reply's parent must already exist on the same post when the reply is
    created, so cycles cannot form.
    """

    id: Optional[CommentId] = None
    post_id: PostId
    user_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    parent_comment_id: Optional[CommentId] = None
