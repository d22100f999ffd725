"""Load feed use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import PageRequest
from blog.domain.model import PostAggregate
from blog.domain.service import PostAggregationService


class LoadFeedRequest(PageRequest):
    """Load feed request."""

    pass


class LoadFeedResponse(BaseModel):
    """Load feed response."""

    posts: list[PostAggregate]


class LoadFeedUseCase:
    """Use case for the home feed: posts with author, tags and rating."""

    def __init__(self, aggregation_service: PostAggregationService) -> None:
        self.aggregation_service = aggregation_service

    async def execute(self, request: LoadFeedRequest) -> LoadFeedResponse:
        """Execute load feed flow."""
        with logfire.span("load_feed.execute", page=request.page):
            posts = await self.aggregation_service.load_feed(
                request.page, request.page_size
            )
            return LoadFeedResponse(posts=posts)
