"""Delete post use case."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: PostId
    actor_id: UserId  # Must be the author


class DeletePostResponse(BaseModel):
    """Delete post response."""

    deleted: bool


class DeletePostUseCase:
    """Use case for soft-deleting one's own post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post is missing or already deleted
            NotAuthorizedError: If the actor is not the author
        """
        await self.post_service.get_owned_post(request.post_id, request.actor_id)
        deleted = await self.post_service.delete_post(request.post_id)
        return DeletePostResponse(deleted=deleted)
