"""PostgreSQL implementation of Tag repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import true, update

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagColumn, TagRepository
from blog.domain.value import TagId
from blog.persistence.mappers import row_to_tag
from blog.persistence.repository.entity import PostgresEntityRepository
from blog.persistence.tables import tags_table


class PostgresTagRepository(
    PostgresEntityRepository[Tag, TagId, TagColumn], TagRepository
):
    """PostgreSQL implementation of TagRepository."""

    table = tags_table
    columns = TagColumn
    mutable_fields = ("name",)
    row_mapper = staticmethod(row_to_tag)

    async def restore(self, tag_id: TagId) -> Optional[Tag]:
        """Bring a soft-deleted tag back to life."""
        with logfire.span("tag_repository.restore", tag_id=tag_id):
            stmt = (
                update(tags_table)
                .where(tags_table.c.id == tag_id, tags_table.c.is_deleted == true())
                .values(is_deleted=False, deleted_at=None, updated_at=datetime.now())
                .returning(tags_table)
            )
            result = await self._execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Tag not found or not deleted", tag_id=tag_id)
                return None

            logfire.info("Tag restored", tag_id=tag_id)
            return self._to_entity(row)
