"""In-memory implementation of Tag repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagColumn, TagRepository
from blog.domain.value import TagId

from .entity import InMemoryEntityRepository


class InMemoryTagRepository(
    InMemoryEntityRepository[Tag, TagId, TagColumn], TagRepository
):
    """In-memory implementation of TagRepository for testing."""

    columns = TagColumn
    mutable_fields = ("name",)
    unique_fields = ("name",)

    async def restore(self, tag_id: TagId) -> Optional[Tag]:
        """Bring a soft-deleted tag back to life."""
        tag = self._rows.get(tag_id)
        if tag is None or not tag.is_deleted:
            return None

        restored = tag.model_copy(
            update={
                "is_deleted": False,
                "deleted_at": None,
                "updated_at": datetime.now(),
            }
        )
        self._rows[tag_id] = restored
        return restored
