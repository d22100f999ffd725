"""Submit review use case."""

import logfire
from pydantic import BaseModel

from blog.domain.model import RatingSummary, Review
from blog.domain.service import ReviewService
from blog.domain.value import PostId, Rate, UserId


class SubmitReviewRequest(BaseModel):
    """Submit review request."""

    post_id: PostId
    actor_id: UserId  # Reviewer, from the caller's AuthSession
    rate: Rate


class SubmitReviewResponse(BaseModel):
    """Submit review response with the post's new rating."""

    review: Review
    rating: RatingSummary


class SubmitReviewUseCase:
    """Use case for rating a post.

    A second submission by the same user changes the existing review.
    """

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize submit review use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: SubmitReviewRequest) -> SubmitReviewResponse:
        """Execute submit review flow.

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        with logfire.span(
            "submit_review.execute", post_id=request.post_id, rate=request.rate.value
        ):
            review = await self.review_service.submit_review(
                request.post_id, request.actor_id, request.rate
            )
            rating = await self.review_service.get_rating(request.post_id)
            return SubmitReviewResponse(review=review, rating=rating)
