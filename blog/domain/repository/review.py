"""Review repository interface."""

from abc import ABC
from enum import Enum
from typing import Optional

from blog.domain.model.review import Review
from blog.domain.repository.base import EntityRepository
from blog.domain.value import PostId, ReviewId, UserId


class ReviewColumn(str, Enum):
    """Columns reviews can be looked up by."""

    POST_ID = "post_id"
    USER_ID = "user_id"


class ReviewRepository(EntityRepository[Review, ReviewId, ReviewColumn], ABC):
    """Repository interface for Review entity."""

    resource = "review"

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Review]:
        """Find the live review a user left on a post.

        Args:
            post_id: The reviewed post
            user_id: The reviewer

        Returns:
            The review if the user already rated the post, None otherwise
        """
        reviews = await self.find_by(user_id, ReviewColumn.USER_ID)
        for review in reviews:
            if review.post_id == post_id:
                return review
        return None
