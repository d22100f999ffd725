"""List reviews use case."""

from pydantic import BaseModel

from blog.domain.model import RatingSummary, Review
from blog.domain.service import ReviewService, summarize_ratings
from blog.domain.value import PostId


class ListReviewsRequest(BaseModel):
    """List reviews request."""

    post_id: PostId


class ListReviewsResponse(BaseModel):
    """List reviews response."""

    reviews: list[Review]
    rating: RatingSummary


class ListReviewsUseCase:
    """Use case for the reviews of a post and their summary."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: ListReviewsRequest) -> ListReviewsResponse:
        """Execute list reviews flow."""
        reviews = await self.review_service.get_reviews_for_post(request.post_id)
        return ListReviewsResponse(reviews=reviews, rating=summarize_ratings(reviews))
