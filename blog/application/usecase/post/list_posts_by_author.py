"""List posts by author use case."""

from pydantic import BaseModel

from blog.application.usecase.base import PageRequest
from blog.domain.model import PostAggregate
from blog.domain.service import PostAggregationService
from blog.domain.value import UserId


class ListPostsByAuthorRequest(PageRequest):
    """List posts by author request."""

    author_id: UserId


class ListPostsByAuthorResponse(BaseModel):
    """List posts by author response."""

    posts: list[PostAggregate]


class ListPostsByAuthorUseCase:
    """Use case for a profile's post list."""

    def __init__(self, aggregation_service: PostAggregationService) -> None:
        self.aggregation_service = aggregation_service

    async def execute(
        self, request: ListPostsByAuthorRequest
    ) -> ListPostsByAuthorResponse:
        """Execute list posts by author flow."""
        posts = await self.aggregation_service.get_posts_by_author(
            request.author_id, request.page, request.page_size
        )
        return ListPostsByAuthorResponse(posts=posts)
