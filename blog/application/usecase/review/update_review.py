"""Update review use case."""

from pydantic import BaseModel

from blog.domain.model import Review
from blog.domain.service import ReviewService
from blog.domain.value import Rate, ReviewId, UserId


class UpdateReviewRequest(BaseModel):
    """Update review request."""

    review_id: ReviewId
    actor_id: UserId  # Must be the reviewer
    rate: Rate


class UpdateReviewResponse(BaseModel):
    """Update review response; ``review`` is None when not found."""

    review: Review | None


class UpdateReviewUseCase:
    """Use case for changing the rate of one's review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: UpdateReviewRequest) -> UpdateReviewResponse:
        """Execute update review flow.

        Raises:
            NotAuthorizedError: If the actor did not write the review
        """
        review = await self.review_service.update_review(
            request.review_id, request.actor_id, request.rate
        )
        return UpdateReviewResponse(review=review)
