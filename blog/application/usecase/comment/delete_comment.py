"""Delete comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: CommentId
    actor_id: UserId  # Must be the comment's author


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted: bool


class DeleteCommentUseCase:
    """Use case for soft-deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotAuthorizedError: If the actor did not write the comment
        """
        deleted = await self.comment_service.delete_comment(
            request.comment_id, request.actor_id
        )
        return DeleteCommentResponse(deleted=deleted)
