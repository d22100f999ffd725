"""Review entity.

Reviews are star ratings readers give to posts.
"""

from typing import Optional

from blog.domain.model.common import SoftDeletableModel
from blog.domain.value import PostId, Rate, ReviewId, UserId


class Review(SoftDeletableModel):
    """Review entity.

    Business rules:
    - One live review per user per post; resubmitting updates the rate
    """

    id: Optional[ReviewId] = None
    post_id: PostId
    user_id: UserId
    rate: Rate
