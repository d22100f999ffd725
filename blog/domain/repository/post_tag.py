"""Post-tag association repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from blog.domain.value import PostId, TagId


class PostTagRepository(ABC):
    """Repository for the many-to-many link between posts and tags.

    Rows are (post_id, tag_id) pairs with no identity of their own and are
    physically removed on detach.
    """

    @abstractmethod
    async def associate(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post.

        Args:
            post_id: The post
            tag_id: The tag

        Raises:
            ConflictError: If the pair is already linked
        """
        pass

    @abstractmethod
    async def tag_ids_for_post(self, post_id: PostId) -> list[TagId]:
        """Get the ids of the tags linked to a post, in link order."""
        pass

    @abstractmethod
    async def post_ids_for_tag(self, tag_id: TagId) -> list[PostId]:
        """Get the ids of the posts carrying a tag, in link order."""
        pass

    @abstractmethod
    async def tag_ids_for_posts(
        self, post_ids: Iterable[PostId]
    ) -> dict[PostId, list[TagId]]:
        """Get the tag ids of several posts in one round trip.

        Args:
            post_ids: Posts to resolve

        Returns:
            Mapping of post id to its tag ids (posts without tags are absent)
        """
        pass

    @abstractmethod
    async def remove_all_for_post(self, post_id: PostId) -> int:
        """Detach every tag from a post.

        Returns:
            Number of links removed
        """
        pass

    @abstractmethod
    async def top_tags(self, limit: int) -> list[TagId]:
        """Get the most linked tag ids.

        Soft-deleted tags are left out before the limit applies.

        Args:
            limit: Maximum number of ids to return

        Returns:
            Live tag ids by link count descending, ties broken by smaller id
        """
        pass
