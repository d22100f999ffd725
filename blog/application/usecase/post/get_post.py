"""Get post use case."""

from pydantic import BaseModel

from blog.domain.model import Post
from blog.domain.service import PostService
from blog.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: PostId


class GetPostResponse(BaseModel):
    """Get post response; ``post`` is None when not found."""

    post: Post | None


class GetPostUseCase:
    """Use case for reading a bare post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow."""
        return GetPostResponse(post=await self.post_service.get_post(request.post_id))
