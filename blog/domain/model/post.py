"""Post aggregate root."""

from typing import Optional

from pydantic import Field

from blog.domain.model.common import SoftDeletableModel
from blog.domain.value import PostId, UserId


class Post(SoftDeletableModel):
    """Post aggregate root.

    Tags are not stored on the post row; they are linked through the
    post_tags association table.
    """

    id: Optional[PostId] = None
    author_id: UserId
    title: str = Field(min_length=1, max_length=50)
    body: str = Field(min_length=1)
