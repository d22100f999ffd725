"""Unit tests for TagService."""

import pytest

from blog.domain.error import ConflictError
from blog.domain.repository import PostTagRepository, TagRepository
from blog.domain.service import TagService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetOrCreateTag:
    """Tests for tag upsert."""

    @pytest.mark.asyncio
    async def test_names_differing_by_case_are_one_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)

        first = await tag_service.get_or_create_tag("Rust")
        second = await tag_service.get_or_create_tag("rust")
        third = await tag_service.get_or_create_tag(" RUST ")

        assert first.id == second.id == third.id
        assert first.name == "RUST"
        assert len(await tag_repo.get_all()) == 1

    @pytest.mark.asyncio
    async def test_deleted_tag_is_restored(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.get_or_create_tag("python")
        await tag_service.delete_tag(tag.id)

        restored = await tag_service.get_or_create_tag("Python")

        assert restored.id == tag.id
        assert restored.is_deleted is False
        assert restored.deleted_at is None

    @pytest.mark.asyncio
    async def test_get_or_create_tags_dedupes_in_first_seen_order(self, unit_env):
        tag_service = await unit_env.get(TagService)

        tags = await tag_service.get_or_create_tags(["go", "Rust", "GO", "rust"])

        assert [tag.name for tag in tags] == ["GO", "RUST"]

    @pytest.mark.asyncio
    async def test_empty_name_is_rejected(self, unit_env):
        tag_service = await unit_env.get(TagService)

        with pytest.raises(ValueError):
            await tag_service.get_or_create_tag("   ")


class TestRenameTag:
    """Tests for rename_tag method."""

    @pytest.mark.asyncio
    async def test_rename_normalizes(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.get_or_create_tag("py")

        renamed = await tag_service.rename_tag(tag.id, "python")

        assert renamed.name == "PYTHON"

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_conflicts(self, unit_env):
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.get_or_create_tag("py")
        await tag_service.get_or_create_tag("python")

        with pytest.raises(ConflictError):
            await tag_service.rename_tag(tag.id, "Python")

    @pytest.mark.asyncio
    async def test_rename_missing_tag(self, unit_env):
        tag_service = await unit_env.get(TagService)

        assert await tag_service.rename_tag(404, "python") is None


class TestTopTags:
    """Tests for top_tags method."""

    @pytest.mark.asyncio
    async def test_most_used_first_ties_by_id(self, unit_env):
        tag_service = await unit_env.get(TagService)
        post_tag_repo = await unit_env.get(PostTagRepository)
        go, rust, zig = await tag_service.get_or_create_tags(["go", "rust", "zig"])

        for post_id in (1, 2, 3):
            await post_tag_repo.associate(post_id, rust.id)
        await post_tag_repo.associate(1, zig.id)
        await post_tag_repo.associate(2, go.id)

        top = await tag_service.top_tags(3)

        assert [tag.name for tag in top] == ["RUST", "GO", "ZIG"]

    @pytest.mark.asyncio
    async def test_deleted_tags_are_skipped(self, unit_env):
        tag_service = await unit_env.get(TagService)
        post_tag_repo = await unit_env.get(PostTagRepository)
        go, rust = await tag_service.get_or_create_tags(["go", "rust"])
        await post_tag_repo.associate(1, go.id)
        await post_tag_repo.associate(2, go.id)
        await post_tag_repo.associate(1, rust.id)
        await tag_service.delete_tag(go.id)

        top = await tag_service.top_tags(5)

        assert [tag.name for tag in top] == ["RUST"]

    @pytest.mark.asyncio
    async def test_deleted_tag_does_not_take_a_slot(self, unit_env):
        """A popular deleted tag leaves room for the next live one."""
        tag_service = await unit_env.get(TagService)
        post_tag_repo = await unit_env.get(PostTagRepository)
        go, rust = await tag_service.get_or_create_tags(["go", "rust"])
        await post_tag_repo.associate(1, go.id)
        await post_tag_repo.associate(2, go.id)
        await post_tag_repo.associate(1, rust.id)
        await tag_service.delete_tag(go.id)

        top = await tag_service.top_tags(1)

        assert [tag.name for tag in top] == ["RUST"]
