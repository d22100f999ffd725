"""Update post use case."""

from pydantic import BaseModel

from blog.application.usecase.base import RequiredText
from blog.domain.error import NotFoundError
from blog.domain.model import Post
from blog.domain.service import PostAggregationService, PostService
from blog.domain.value import PostId, UserId

from .create_post import Title


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: PostId
    actor_id: UserId  # Must be the author
    title: Title
    body: RequiredText


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: Post


class UpdatePostUseCase:
    """Use case for editing a post's title and body."""

    def __init__(
        self,
        post_service: PostService,
        aggregation_service: PostAggregationService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
            aggregation_service: Post aggregation service
        """
        self.post_service = post_service
        self.aggregation_service = aggregation_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the actor is not the author
        """
        await self.post_service.get_owned_post(request.post_id, request.actor_id)

        updated = await self.aggregation_service.update_post(
            request.post_id, request.title, request.body
        )
        if updated is None:
            raise NotFoundError("post", request.post_id)

        return UpdatePostResponse(post=updated)
