"""Update comment use case."""

from pydantic import BaseModel, Field

from blog.application.usecase.base import RequiredText
from blog.domain.model import Comment
from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: CommentId
    actor_id: UserId  # Must be the comment's author
    body: RequiredText = Field(max_length=10000)


class UpdateCommentResponse(BaseModel):
    """Update comment response; ``comment`` is None when not found."""

    comment: Comment | None


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotAuthorizedError: If the actor did not write the comment
        """
        comment = await self.comment_service.update_comment(
            request.comment_id, request.actor_id, request.body
        )
        return UpdateCommentResponse(comment=comment)
