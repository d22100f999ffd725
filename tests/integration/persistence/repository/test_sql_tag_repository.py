"""Integration tests for the SQL tag and post-tag stores."""

import pytest

from blog.domain.error import ConflictError
from blog.domain.model import Post, Tag, User
from blog.domain.value import TagName
from blog.persistence.repository import (
    PostgresPostRepository,
    PostgresPostTagRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)


async def _posts(session, count: int) -> list[Post]:
    author = await PostgresUserRepository(session).create(
        User(username="alice", email="alice@example.com")
    )
    repo = PostgresPostRepository(session)
    return [
        await repo.create(Post(author_id=author.id, title=f"P{i}", body="B"))
        for i in range(count)
    ]


class TestTagRepository:
    """Tests for PostgresTagRepository."""

    @pytest.mark.asyncio
    async def test_find_by_name_is_normalized(self, session):
        repo = PostgresTagRepository(session)
        tag = await repo.create(Tag(name="rust"))

        found = await repo.find_by_name(TagName("Rust"))

        assert tag.name == "RUST"
        assert found.id == tag.id

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, session):
        repo = PostgresTagRepository(session)
        await repo.create(Tag(name="rust"))

        with pytest.raises(ConflictError):
            await repo.create(Tag(name="RUST"))

    @pytest.mark.asyncio
    async def test_restore(self, session):
        repo = PostgresTagRepository(session)
        tag = await repo.create(Tag(name="go"))
        await repo.delete(tag.id)

        assert await repo.find_by_name(TagName("go")) is None
        restored = await repo.restore(tag.id)

        assert restored.id == tag.id
        assert restored.is_deleted is False
        assert restored.deleted_at is None
        assert await repo.restore(tag.id) is None


class TestPostTagRepository:
    """Tests for PostgresPostTagRepository."""

    @pytest.mark.asyncio
    async def test_associate_and_lookups(self, session):
        first, second = await _posts(session, 2)
        tags = PostgresTagRepository(session)
        go = await tags.create(Tag(name="go"))
        rust = await tags.create(Tag(name="rust"))
        repo = PostgresPostTagRepository(session)

        await repo.associate(first.id, rust.id)
        await repo.associate(first.id, go.id)
        await repo.associate(second.id, go.id)

        assert await repo.tag_ids_for_post(first.id) == [go.id, rust.id]
        assert await repo.post_ids_for_tag(go.id) == [first.id, second.id]
        assert await repo.tag_ids_for_posts([first.id, second.id]) == {
            first.id: [go.id, rust.id],
            second.id: [go.id],
        }
        assert await repo.tag_ids_for_posts([]) == {}

    @pytest.mark.asyncio
    async def test_duplicate_link_conflicts(self, session):
        [post] = await _posts(session, 1)
        tag = await PostgresTagRepository(session).create(Tag(name="go"))
        repo = PostgresPostTagRepository(session)
        await repo.associate(post.id, tag.id)

        with pytest.raises(ConflictError):
            await repo.associate(post.id, tag.id)

    @pytest.mark.asyncio
    async def test_remove_all_and_top_tags(self, session):
        posts = await _posts(session, 3)
        tags = PostgresTagRepository(session)
        go = await tags.create(Tag(name="go"))
        rust = await tags.create(Tag(name="rust"))
        zig = await tags.create(Tag(name="zig"))
        repo = PostgresPostTagRepository(session)
        for post in posts:
            await repo.associate(post.id, rust.id)
        await repo.associate(posts[0].id, zig.id)
        await repo.associate(posts[1].id, go.id)

        assert await repo.top_tags(2) == [rust.id, go.id]
        assert await repo.top_tags(0) == []

        assert await repo.remove_all_for_post(posts[0].id) == 2
        assert await repo.tag_ids_for_post(posts[0].id) == []
        assert await repo.top_tags(5) == [rust.id, go.id]

    @pytest.mark.asyncio
    async def test_top_tags_skips_deleted_before_limit(self, session):
        first, second = await _posts(session, 2)
        tags = PostgresTagRepository(session)
        go = await tags.create(Tag(name="go"))
        rust = await tags.create(Tag(name="rust"))
        repo = PostgresPostTagRepository(session)
        await repo.associate(first.id, go.id)
        await repo.associate(second.id, go.id)
        await repo.associate(first.id, rust.id)
        await tags.delete(go.id)

        assert await repo.top_tags(1) == [rust.id]
