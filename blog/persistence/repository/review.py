"""PostgreSQL implementation of Review repository."""

from typing import Any, Dict, Optional

import logfire
from sqlalchemy import select

from blog.domain.model.review import Review
from blog.domain.repository.review import ReviewColumn, ReviewRepository
from blog.domain.value import PostId, ReviewId, UserId
from blog.persistence.mappers import review_to_dict, row_to_review
from blog.persistence.repository.entity import PostgresEntityRepository
from blog.persistence.tables import reviews_table


class PostgresReviewRepository(
    PostgresEntityRepository[Review, ReviewId, ReviewColumn], ReviewRepository
):
    """PostgreSQL implementation of ReviewRepository."""

    table = reviews_table
    columns = ReviewColumn
    mutable_fields = ("rate",)
    row_mapper = staticmethod(row_to_review)

    def _to_dict(self, entity: Review) -> Dict[str, Any]:
        return review_to_dict(entity)

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Review]:
        """Find the live review a user left on a post."""
        with logfire.span(
            "review_repository.find_by_post_and_user",
            post_id=post_id,
            user_id=user_id,
        ):
            stmt = (
                select(reviews_table)
                .where(
                    reviews_table.c.post_id == post_id,
                    reviews_table.c.user_id == user_id,
                    self._live(),
                )
                .order_by(reviews_table.c.created_at.desc(), reviews_table.c.id.desc())
                .limit(1)
            )
            result = await self._execute(stmt)
            row = result.fetchone()
            return self._to_entity(row) if row else None
