"""Tag domain service."""

from typing import Iterable

import logfire

from blog.domain.model.tag import Tag
from blog.domain.repository import PostTagRepository, TagRepository
from blog.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(
        self, tag_repository: TagRepository, post_tag_repository: PostTagRepository
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            post_tag_repository: Post-tag association repository
        """
        self.tag_repository = tag_repository
        self.post_tag_repository = post_tag_repository

    async def get_or_create_tag(self, name: str | TagName) -> Tag:
        """Return the tag with this name, creating it if needed.

        Names are compared after normalization, so 'Rust', 'rust' and
        'RUST' all resolve to the same tag. A soft-deleted tag with the
        name is restored rather than duplicated.

        Args:
            name: Raw or normalized tag name

        Returns:
            The existing, restored or newly created tag

        Raises:
            ValueError: If the name is empty or too long once normalized
        """
        tag_name = name if isinstance(name, TagName) else TagName(name)
        with logfire.span("tag_service.get_or_create_tag", tag_name=tag_name.root):
            existing = await self.tag_repository.find_by_name(tag_name)
            if existing:
                return existing

            deleted = await self.tag_repository.find_by_name(
                tag_name, include_deleted=True
            )
            if deleted:
                restored = await self.tag_repository.restore(deleted.id)
                if restored:
                    logfire.info("Tag restored", tag_name=tag_name.root)
                    return restored

            created = await self.tag_repository.create(Tag(name=tag_name.root))
            logfire.info("Tag created", tag_id=created.id, tag_name=tag_name.root)
            return created

    async def get_or_create_tags(self, names: Iterable[str]) -> list[Tag]:
        """Resolve several names, ignoring duplicates after normalization.

        Returns:
            One tag per distinct normalized name, in first-seen order
        """
        tags: list[Tag] = []
        seen: set[str] = set()
        for raw in names:
            tag_name = TagName(raw)
            if tag_name.root in seen:
                continue
            seen.add(tag_name.root)
            tags.append(await self.get_or_create_tag(tag_name))
        return tags

    async def get_tag(self, tag_id: TagId) -> Tag | None:
        """Get a tag by ID."""
        with logfire.span("tag_service.get_tag", tag_id=tag_id):
            tag = await self.tag_repository.get(tag_id)
            if tag is None:
                logfire.warn("Tag not found", tag_id=tag_id)
            return tag

    async def list_tags(self, page: int = 1, page_size: int = 0) -> list[Tag]:
        """List tags, newest first."""
        with logfire.span("tag_service.list_tags", page=page, page_size=page_size):
            tags = await self.tag_repository.get_all(page, page_size)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def rename_tag(self, tag_id: TagId, name: str) -> Tag | None:
        """Rename a live tag.

        Returns:
            The renamed tag, or None if not found

        Raises:
            ConflictError: If another tag already has the name
        """
        with logfire.span("tag_service.rename_tag", tag_id=tag_id):
            current = await self.tag_repository.get(tag_id)
            if current is None:
                logfire.warn("Tag not found for rename", tag_id=tag_id)
                return None
            return await self.tag_repository.update(tag_id, Tag(name=name))

    async def delete_tag(self, tag_id: TagId) -> bool:
        """Soft-delete a tag; its post links are kept."""
        with logfire.span("tag_service.delete_tag", tag_id=tag_id):
            deleted = await self.tag_repository.delete(tag_id)
            logfire.info("Tag delete", tag_id=tag_id, deleted=deleted)
            return deleted

    async def top_tags(self, limit: int) -> list[Tag]:
        """Get the most used live tags.

        Args:
            limit: Maximum number of tags

        Returns:
            Tags by number of posts descending, ties by smaller id
        """
        with logfire.span("tag_service.top_tags", limit=limit):
            tag_ids = await self.post_tag_repository.top_tags(limit)
            tags = {tag.id: tag for tag in await self.tag_repository.get_many(tag_ids)}
            return [tags[tag_id] for tag_id in tag_ids if tag_id in tags]
