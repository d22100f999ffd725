"""Comment domain service."""

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentColumn, CommentRepository, PostRepository
from blog.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def create_comment(
        self,
        post_id: PostId,
        user_id: UserId,
        body: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            user_id: Author user ID
            body: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or the parent comment is missing or deleted
            ValidationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            user_id=user_id,
            parent_comment_id=parent_comment_id,
        ):
            if await self.post_repository.get(post_id) is None:
                logfire.error("Post not found for comment", post_id=post_id)
                raise NotFoundError("post", post_id)

            if parent_comment_id is not None:
                parent = await self.comment_repository.get(parent_comment_id)
                if parent is None:
                    logfire.error(
                        "Parent comment not found",
                        parent_comment_id=parent_comment_id,
                        post_id=post_id,
                    )
                    raise NotFoundError("comment", parent_comment_id)
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_comment_id=parent_comment_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            comment = Comment(
                post_id=post_id,
                user_id=user_id,
                body=body,
                parent_comment_id=parent_comment_id,
            )
            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                is_reply=parent_comment_id is not None,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.get(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get the live comments of a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments; use build_comment_tree to thread them
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_in(
                CommentColumn.POST_ID, [post_id]
            )
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def _get_owned_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> Comment | None:
        comment = await self.comment_repository.get(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            return None
        if comment.user_id != user_id:
            logfire.warn(
                "Comment modification refused", comment_id=comment_id, user_id=user_id
            )
            raise NotAuthorizedError("comment", comment_id, user_id)
        return comment

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, body: str
    ) -> Comment | None:
        """Replace the body of a comment.

        Args:
            comment_id: Comment ID
            user_id: User asking for the change
            body: New text

        Returns:
            Updated comment, or None if the comment is missing or deleted

        Raises:
            NotAuthorizedError: If the user did not write the comment
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=comment_id, user_id=user_id
        ):
            current = await self._get_owned_comment(comment_id, user_id)
            if current is None:
                return None

            candidate = Comment(**{**current.model_dump(), "body": body})
            updated = await self.comment_repository.update(comment_id, candidate)
            if updated:
                logfire.info("Comment updated", comment_id=comment_id)
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Soft-delete a comment; replies are kept but drop out of the tree.

        Returns:
            True if the comment was live and is now deleted

        Raises:
            NotAuthorizedError: If the user did not write the comment
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, user_id=user_id
        ):
            if await self._get_owned_comment(comment_id, user_id) is None:
                return False
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info("Comment delete", comment_id=comment_id, deleted=deleted)
            return deleted
