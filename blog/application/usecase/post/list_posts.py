"""List posts use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import PageRequest
from blog.domain.model import Post
from blog.domain.service import PostService


class ListPostsRequest(PageRequest):
    """List posts request."""

    pass


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[Post]


class ListPostsUseCase:
    """Use case for paging through bare posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        with logfire.span("list_posts.execute", page=request.page):
            posts = await self.post_service.list_posts(request.page, request.page_size)
            return ListPostsResponse(posts=posts)
