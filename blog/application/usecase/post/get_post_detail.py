"""Get post detail use case."""

from pydantic import BaseModel

from blog.domain.model import PostAggregate
from blog.domain.service import PostAggregationService
from blog.domain.value import PostId


class GetPostDetailRequest(BaseModel):
    """Get post detail request."""

    post_id: PostId


class GetPostDetailResponse(BaseModel):
    """Get post detail response; ``detail`` is None when not found."""

    detail: PostAggregate | None


class GetPostDetailUseCase:
    """Use case for the post page: post, author, tags, comment tree, rating."""

    def __init__(self, aggregation_service: PostAggregationService) -> None:
        self.aggregation_service = aggregation_service

    async def execute(self, request: GetPostDetailRequest) -> GetPostDetailResponse:
        """Execute get post detail flow."""
        detail = await self.aggregation_service.load_post_detail(request.post_id)
        return GetPostDetailResponse(detail=detail)
