"""List comments use case."""

from pydantic import BaseModel

from blog.config import Settings
from blog.domain.model import Comment, CommentNode
from blog.domain.service import CommentService, build_comment_tree
from blog.domain.value import PostId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: PostId


class ListCommentsResponse(BaseModel):
    """List comments response.

    ``comments`` is the flat list, oldest first; ``tree`` the rendered
    thread.
    """

    comments: list[Comment]
    tree: list[CommentNode]


class ListCommentsUseCase:
    """Use case for the comment thread of a post."""

    def __init__(self, comment_service: CommentService, settings: Settings) -> None:
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow."""
        comments = await self.comment_service.get_comments_for_post(request.post_id)
        return ListCommentsResponse(
            comments=comments,
            tree=build_comment_tree(comments, self.settings.comments.max_depth),
        )
