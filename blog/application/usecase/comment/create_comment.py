"""Create comment use case."""

from pydantic import BaseModel, Field

from blog.application.usecase.base import RequiredText
from blog.domain.model import Comment
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: PostId
    actor_id: UserId  # Author, from the caller's AuthSession
    body: RequiredText = Field(max_length=10000)
    parent_comment_id: CommentId | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: Comment


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or parent comment is missing or deleted
            ValidationError: If the parent comment belongs to another post
        """
        comment = await self.comment_service.create_comment(
            post_id=request.post_id,
            user_id=request.actor_id,
            body=request.body,
            parent_comment_id=request.parent_comment_id,
        )
        return CreateCommentResponse(comment=comment)
