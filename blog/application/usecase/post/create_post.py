"""Create post use case."""

from typing import Annotated

import logfire
from pydantic import BaseModel, Field, StringConstraints

from blog.application.usecase.base import RequiredText, TagNames
from blog.domain.model import Post, PostAggregate
from blog.domain.service import PostAggregationService
from blog.domain.value import UserId

Title = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)
]


class CreatePostRequest(BaseModel):
    """Create post request."""

    actor_id: UserId  # Author, from the caller's AuthSession
    title: Title
    body: RequiredText
    tag_names: TagNames = Field(default_factory=list)


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: Post
    detail: PostAggregate


class CreatePostUseCase:
    """Use case for publishing a post with its tags."""

    def __init__(self, aggregation_service: PostAggregationService) -> None:
        """Initialize create post use case.

        Args:
            aggregation_service: Post aggregation service
        """
        self.aggregation_service = aggregation_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Create the post row
        2. Upsert each tag and link it to the post
        3. Load the post back as a detail view

        All writes share the request's unit of work.

        Raises:
            NotFoundError: If the author does not exist
        """
        with logfire.span(
            "create_post.execute", title=request.title, tags=request.tag_names
        ):
            post = await self.aggregation_service.create_post(
                author_id=request.actor_id,
                title=request.title,
                body=request.body,
                tag_names=request.tag_names,
            )
            detail = await self.aggregation_service.load_post_detail(post.id)
            return CreatePostResponse(post=post, detail=detail)
