"""Review domain service."""

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.model.aggregate import RatingSummary
from blog.domain.model.review import Review
from blog.domain.repository import PostRepository, ReviewColumn, ReviewRepository
from blog.domain.value import PostId, Rate, ReviewId, UserId

from .base import Service
from .rating import summarize_ratings


class ReviewService(Service):
    """Domain service for review operations.

    A user has at most one live review per post: submitting again changes
    the rate of the existing review.
    """

    def __init__(
        self,
        review_repository: ReviewRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize review service.

        Args:
            review_repository: Review repository
            post_repository: Post repository
        """
        self.review_repository = review_repository
        self.post_repository = post_repository

    async def submit_review(
        self, post_id: PostId, user_id: UserId, rate: Rate
    ) -> Review:
        """Rate a post, or change the rate already given.

        Args:
            post_id: Reviewed post
            user_id: Reviewer
            rate: Rate category

        Returns:
            The created or updated review

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        with logfire.span(
            "review_service.submit_review",
            post_id=post_id,
            user_id=user_id,
            rate=rate.value,
        ):
            if await self.post_repository.get(post_id) is None:
                logfire.error("Post not found for review", post_id=post_id)
                raise NotFoundError("post", post_id)

            existing = await self.review_repository.find_by_post_and_user(
                post_id, user_id
            )
            if existing:
                updated = await self.review_repository.update(
                    existing.id, existing.model_copy(update={"rate": rate})
                )
                if updated:
                    logfire.info("Review updated", review_id=updated.id)
                    return updated

            created = await self.review_repository.create(
                Review(post_id=post_id, user_id=user_id, rate=rate)
            )
            logfire.info("Review created", review_id=created.id, post_id=post_id)
            return created

    async def get_reviews_for_post(self, post_id: PostId) -> list[Review]:
        """Get the live reviews of a post, oldest first."""
        with logfire.span("review_service.get_reviews_for_post", post_id=post_id):
            return await self.review_repository.find_in(
                ReviewColumn.POST_ID, [post_id]
            )

    async def get_rating(self, post_id: PostId) -> RatingSummary:
        """Mean rate and review count of a post."""
        return summarize_ratings(await self.get_reviews_for_post(post_id))

    async def _get_owned_review(
        self, review_id: ReviewId, user_id: UserId
    ) -> Review | None:
        review = await self.review_repository.get(review_id)
        if review is None:
            logfire.warn("Review not found", review_id=review_id)
            return None
        if review.user_id != user_id:
            raise NotAuthorizedError("review", review_id, user_id)
        return review

    async def update_review(
        self, review_id: ReviewId, user_id: UserId, rate: Rate
    ) -> Review | None:
        """Change the rate of a review.

        Returns:
            Updated review, or None if missing or deleted

        Raises:
            NotAuthorizedError: If the user did not write the review
        """
        with logfire.span(
            "review_service.update_review", review_id=review_id, user_id=user_id
        ):
            current = await self._get_owned_review(review_id, user_id)
            if current is None:
                return None
            return await self.review_repository.update(
                review_id, current.model_copy(update={"rate": rate})
            )

    async def delete_review(self, review_id: ReviewId, user_id: UserId) -> bool:
        """Soft-delete a review.

        Raises:
            NotAuthorizedError: If the user did not write the review
        """
        with logfire.span(
            "review_service.delete_review", review_id=review_id, user_id=user_id
        ):
            if await self._get_owned_review(review_id, user_id) is None:
                return False
            deleted = await self.review_repository.delete(review_id)
            logfire.info("Review delete", review_id=review_id, deleted=deleted)
            return deleted
