"""Tag repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.repository.base import EntityRepository
from blog.domain.value import TagId, TagName


class TagColumn(str, Enum):
    """Columns tags can be looked up by."""

    NAME = "name"


class TagRepository(EntityRepository[Tag, TagId, TagColumn], ABC):
    """Repository interface for Tag aggregate."""

    resource = "tag"

    async def find_by_name(
        self, name: TagName, include_deleted: bool = False
    ) -> Optional[Tag]:
        """Find tag by normalized name.

        Args:
            name: Tag name
            include_deleted: Whether a soft-deleted tag may be returned

        Returns:
            Tag if found, None otherwise
        """
        return await self.find_one_by(name.root, TagColumn.NAME, include_deleted)

    @abstractmethod
    async def restore(self, tag_id: TagId) -> Optional[Tag]:
        """Bring a soft-deleted tag back to life.

        Args:
            tag_id: Tag identifier

        Returns:
            The restored tag, or None if the id is unknown or the tag is live
        """
        pass
