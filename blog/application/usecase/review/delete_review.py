"""Delete review use case."""

from pydantic import BaseModel

from blog.domain.service import ReviewService
from blog.domain.value import ReviewId, UserId


class DeleteReviewRequest(BaseModel):
    """Delete review request."""

    review_id: ReviewId
    actor_id: UserId  # Must be the reviewer


class DeleteReviewResponse(BaseModel):
    """Delete review response."""

    deleted: bool


class DeleteReviewUseCase:
    """Use case for soft-deleting one's review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: DeleteReviewRequest) -> DeleteReviewResponse:
        """Execute delete review flow.

        Raises:
            NotAuthorizedError: If the actor did not write the review
        """
        deleted = await self.review_service.delete_review(
            request.review_id, request.actor_id
        )
        return DeleteReviewResponse(deleted=deleted)
