"""Post domain service."""

import logfire

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations.

    Writes that touch tags go through PostAggregationService.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.get(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def list_posts(self, page: int = 1, page_size: int = 0) -> list[Post]:
        """List posts, newest first."""
        with logfire.span("post_service.list_posts", page=page, page_size=page_size):
            posts = await self.post_repository.get_all(page, page_size)
            logfire.info("Posts retrieved", count=len(posts))
            return posts

    async def get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Load a post the given user is allowed to modify.

        Args:
            post_id: Post ID
            user_id: User asking for the change

        Returns:
            The post

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the user is not the author
        """
        post = await self.post_repository.get(post_id)
        if post is None:
            logfire.warn("Post not found for modification", post_id=post_id)
            raise NotFoundError("post", post_id)
        if post.author_id != user_id:
            logfire.warn(
                "Post modification refused", post_id=post_id, user_id=user_id
            )
            raise NotAuthorizedError("post", post_id, user_id)
        return post

    async def delete_post(self, post_id: PostId) -> bool:
        """Soft-delete a post.

        Its comments, reviews and tag links are kept so the post can be
        audited later.

        Returns:
            True if the post was live and is now deleted
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post delete", post_id=post_id, deleted=deleted)
            return deleted
