"""PostgreSQL implementation of the post-tag association repository."""

from collections import defaultdict
from typing import Iterable

import logfire
from sqlalchemy import delete, false, func, insert, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from blog.domain.error import BackendUnavailableError, ConflictError
from blog.domain.repository.post_tag import PostTagRepository
from blog.domain.value import PostId, TagId
from blog.persistence.tables import post_tags_table, tags_table


class PostgresPostTagRepository(PostTagRepository):
    """PostgreSQL implementation of PostTagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _execute(self, stmt: Executable):
        try:
            return await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("post_tag", str(e.orig)) from e
        except (OperationalError, InterfaceError, OSError) as e:
            logfire.error("Database unavailable", resource="post_tag", error=str(e))
            raise BackendUnavailableError(str(e)) from e

    async def associate(self, post_id: PostId, tag_id: TagId) -> None:
        """Link a tag to a post."""
        with logfire.span(
            "post_tag_repository.associate", post_id=post_id, tag_id=tag_id
        ):
            stmt = insert(post_tags_table).values(post_id=post_id, tag_id=tag_id)
            await self._execute(stmt)

    async def tag_ids_for_post(self, post_id: PostId) -> list[TagId]:
        """Get the ids of the tags linked to a post."""
        stmt = (
            select(post_tags_table.c.tag_id)
            .where(post_tags_table.c.post_id == post_id)
            .order_by(post_tags_table.c.tag_id)
        )
        result = await self._execute(stmt)
        return [TagId(tag_id) for tag_id in result.scalars().all()]

    async def post_ids_for_tag(self, tag_id: TagId) -> list[PostId]:
        """Get the ids of the posts carrying a tag."""
        stmt = (
            select(post_tags_table.c.post_id)
            .where(post_tags_table.c.tag_id == tag_id)
            .order_by(post_tags_table.c.post_id)
        )
        result = await self._execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]

    async def tag_ids_for_posts(
        self, post_ids: Iterable[PostId]
    ) -> dict[PostId, list[TagId]]:
        """Get the tag ids of several posts in a single query."""
        ids = sorted(set(post_ids))
        if not ids:
            return {}

        with logfire.span("post_tag_repository.tag_ids_for_posts", count=len(ids)):
            stmt = (
                select(post_tags_table.c.post_id, post_tags_table.c.tag_id)
                .where(post_tags_table.c.post_id.in_(ids))
                .order_by(post_tags_table.c.post_id, post_tags_table.c.tag_id)
            )
            result = await self._execute(stmt)

            tag_map: dict[PostId, list[TagId]] = defaultdict(list)
            for row in result.fetchall():
                tag_map[PostId(row.post_id)].append(TagId(row.tag_id))
            return dict(tag_map)

    async def remove_all_for_post(self, post_id: PostId) -> int:
        """Detach every tag from a post."""
        with logfire.span("post_tag_repository.remove_all_for_post", post_id=post_id):
            stmt = delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
            result = await self._execute(stmt)
            logfire.info("Post tags removed", post_id=post_id, removed=result.rowcount)
            return result.rowcount

    async def top_tags(self, limit: int) -> list[TagId]:
        """Get the most linked live tag ids."""
        if limit <= 0:
            return []

        with logfire.span("post_tag_repository.top_tags", limit=limit):
            uses = func.count().label("uses")
            stmt = (
                select(post_tags_table.c.tag_id, uses)
                .join(tags_table, tags_table.c.id == post_tags_table.c.tag_id)
                .where(tags_table.c.is_deleted == false())
                .group_by(post_tags_table.c.tag_id)
                .order_by(uses.desc(), post_tags_table.c.tag_id)
                .limit(limit)
            )
            result = await self._execute(stmt)
            return [TagId(row.tag_id) for row in result.fetchall()]
