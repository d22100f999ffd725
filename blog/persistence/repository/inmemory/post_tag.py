"""In-memory post-tag association repository for testing."""

from collections import Counter
from typing import Iterable, Optional

from blog.domain.error import ConflictError
from blog.domain.repository.post_tag import PostTagRepository
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId, TagId


class InMemoryPostTagRepository(PostTagRepository):
    """In-memory implementation of PostTagRepository for testing."""

    def __init__(self, tag_repository: Optional[TagRepository] = None) -> None:
        """Initialize empty repository.

        Args:
            tag_repository: Tag store used to leave deleted tags out of rankings
        """
        self._links: set[tuple[PostId, TagId]] = set()
        self.tag_repository = tag_repository

    async def associate(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post."""
        if (post_id, tag_id) in self._links:
            raise ConflictError("post_tag", f"post {post_id} already has tag {tag_id}")
        self._links.add((post_id, tag_id))

    async def tag_ids_for_post(self, post_id: PostId) -> list[TagId]:
        """Get the ids of the tags linked to a post."""
        return sorted(tag_id for pid, tag_id in self._links if pid == post_id)

    async def post_ids_for_tag(self, tag_id: TagId) -> list[PostId]:
        """Get the ids of the posts carrying a tag."""
        return sorted(post_id for post_id, tid in self._links if tid == tag_id)

    async def tag_ids_for_posts(
        self, post_ids: Iterable[PostId]
    ) -> dict[PostId, list[TagId]]:
        """Get the tag ids of several posts."""
        wanted = set(post_ids)
        tag_map: dict[PostId, list[TagId]] = {}
        for post_id, tag_id in sorted(self._links):
            if post_id in wanted:
                tag_map.setdefault(post_id, []).append(tag_id)
        return tag_map

    async def remove_all_for_post(self, post_id: PostId) -> int:
        """Detach every tag from a post."""
        removed = {link for link in self._links if link[0] == post_id}
        self._links -= removed
        return len(removed)

    async def top_tags(self, limit: int) -> list[TagId]:
        """Get the most linked live tag ids."""
        if limit <= 0:
            return []
        uses = Counter(tag_id for _, tag_id in self._links)
        ranked = sorted(uses.items(), key=lambda item: (-item[1], item[0]))

        top: list[TagId] = []
        for tag_id, _ in ranked:
            if len(top) == limit:
                break
            if self.tag_repository and await self.tag_repository.get(tag_id) is None:
                continue
            top.append(tag_id)
        return top
