"""Replace post tags use case."""

from pydantic import BaseModel

from blog.application.usecase.base import TagNames
from blog.domain.model import Tag
from blog.domain.service import PostAggregationService, PostService
from blog.domain.value import PostId, UserId


class ReplacePostTagsRequest(BaseModel):
    """Replace post tags request."""

    post_id: PostId
    actor_id: UserId  # Must be the author
    tag_names: TagNames


class ReplacePostTagsResponse(BaseModel):
    """Replace post tags response."""

    tags: list[Tag]


class ReplacePostTagsUseCase:
    """Use case for swapping the tag set of a post."""

    def __init__(
        self,
        post_service: PostService,
        aggregation_service: PostAggregationService,
    ) -> None:
        self.post_service = post_service
        self.aggregation_service = aggregation_service

    async def execute(self, request: ReplacePostTagsRequest) -> ReplacePostTagsResponse:
        """Execute replace post tags flow.

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the actor is not the author
        """
        await self.post_service.get_owned_post(request.post_id, request.actor_id)
        tags = await self.aggregation_service.replace_tag_set(
            request.post_id, request.tag_names
        )
        return ReplacePostTagsResponse(tags=tags)
