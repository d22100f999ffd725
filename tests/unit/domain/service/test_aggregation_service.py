"""Unit tests for PostAggregationService."""

import pytest
import pytest_asyncio

from blog.domain.error import NotFoundError
from blog.domain.repository import PostTagRepository
from blog.domain.service import (
    CommentService,
    PostAggregationService,
    PostService,
    ReviewService,
    TagService,
    UserService,
)
from blog.domain.value import PostId, Rate, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def author(unit_env, user_data):
    user_service = await unit_env.get(UserService)
    return await user_service.register(**user_data)


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_then_load_detail(self, unit_env, author):
        """User -> post with two tags -> detail with everything attached."""
        aggregation = await unit_env.get(PostAggregationService)

        post = await aggregation.create_post(
            author.id, "Hello", "First post", ["go", "rust"]
        )
        detail = await aggregation.load_post_detail(post.id)

        assert detail.post.id == post.id
        assert detail.author.username == "alice"
        assert detail.author.password is None
        assert sorted(tag.name for tag in detail.tags) == ["GO", "RUST"]
        assert detail.comments == []
        assert detail.reviews == []
        assert detail.comment_tree == []
        assert detail.rating.average == 0.0
        assert detail.rating.count == 0

    @pytest.mark.asyncio
    async def test_case_variants_link_one_tag(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        post_tag_repo = await unit_env.get(PostTagRepository)
        tag_service = await unit_env.get(TagService)

        post = await aggregation.create_post(
            author.id, "Hello", "Body", ["Rust", "rust", "RUST"]
        )

        assert len(await post_tag_repo.tag_ids_for_post(post.id)) == 1
        assert [tag.name for tag in await tag_service.list_tags()] == ["RUST"]

    @pytest.mark.asyncio
    async def test_unknown_author_raises(self, unit_env):
        aggregation = await unit_env.get(PostAggregationService)

        with pytest.raises(NotFoundError):
            await aggregation.create_post(UserId(404), "Hello", "Body", ["go"])


class TestReplaceTagSet:
    """Tests for replace_tag_set method."""

    @pytest.mark.asyncio
    async def test_replacing_twice_keeps_two_links(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        post_tag_repo = await unit_env.get(PostTagRepository)
        post = await aggregation.create_post(author.id, "Hello", "Body", ["java"])

        await aggregation.replace_tag_set(post.id, ["go", "rust"])
        tags = await aggregation.replace_tag_set(post.id, ["go", "rust"])

        assert [tag.name for tag in tags] == ["GO", "RUST"]
        assert len(await post_tag_repo.tag_ids_for_post(post.id)) == 2

    @pytest.mark.asyncio
    async def test_empty_set_detaches_everything(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        post_tag_repo = await unit_env.get(PostTagRepository)
        post = await aggregation.create_post(author.id, "Hello", "Body", ["go"])

        assert await aggregation.replace_tag_set(post.id, []) == []
        assert await post_tag_repo.tag_ids_for_post(post.id) == []

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        aggregation = await unit_env.get(PostAggregationService)

        with pytest.raises(NotFoundError):
            await aggregation.replace_tag_set(PostId(404), ["go"])


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_update_keeps_tags(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        post = await aggregation.create_post(author.id, "Hello", "Body", ["go"])

        updated = await aggregation.update_post(post.id, "Hello again", "New body")
        detail = await aggregation.load_post_detail(post.id)

        assert updated.title == "Hello again"
        assert detail.post.body == "New body"
        assert [tag.name for tag in detail.tags] == ["GO"]

    @pytest.mark.asyncio
    async def test_deleted_post_is_not_resurrected(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        post_service = await unit_env.get(PostService)
        post = await aggregation.create_post(author.id, "Hello", "Body")
        await post_service.delete_post(post.id)

        assert await aggregation.update_post(post.id, "Back", "Again") is None
        assert await aggregation.load_post_detail(post.id) is None


class TestReadModels:
    """Tests for load_feed, load_post_detail and get_posts_by_author."""

    @pytest.mark.asyncio
    async def test_detail_threads_comments_and_rates(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        comment_service = await unit_env.get(CommentService)
        review_service = await unit_env.get(ReviewService)
        post = await aggregation.create_post(author.id, "Hello", "Body")

        parent_id = None
        for body in ("a", "b", "c", "d"):
            comment = await comment_service.create_comment(
                post.id, author.id, body, parent_comment_id=parent_id
            )
            parent_id = comment.id
        await review_service.submit_review(post.id, UserId(7), Rate.FIVE)
        await review_service.submit_review(post.id, UserId(8), Rate.FIVE)
        await review_service.submit_review(post.id, UserId(9), Rate.ONE)

        detail = await aggregation.load_post_detail(post.id)

        assert len(detail.comments) == 4
        [top] = detail.comment_tree
        assert top.comment.body == "a"
        [second] = top.children
        assert [node.comment.body for node in second.children] == ["c", "d"]
        assert detail.rating.count == 3
        assert detail.rating.average == pytest.approx(11 / 3)

    @pytest.mark.asyncio
    async def test_feed_is_newest_first_and_paginated(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        for index in range(3):
            await aggregation.create_post(
                author.id, f"Post {index}", "Body", [f"tag{index}"]
            )

        feed = await aggregation.load_feed(page=0, page_size=0)
        second_page = await aggregation.load_feed(page=2, page_size=2)
        beyond = await aggregation.load_feed(page=5, page_size=2)

        assert [item.post.title for item in feed] == ["Post 2", "Post 1", "Post 0"]
        assert [item.tags[0].name for item in feed] == ["TAG2", "TAG1", "TAG0"]
        assert all(item.author.id == author.id for item in feed)
        assert all(item.comment_tree == [] for item in feed)
        assert [item.post.title for item in second_page] == ["Post 0"]
        assert beyond == []

    @pytest.mark.asyncio
    async def test_feed_hides_deleted_tags(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        tag_service = await unit_env.get(TagService)
        await aggregation.create_post(author.id, "Hello", "Body", ["go", "rust"])
        go = await tag_service.get_or_create_tag("go")
        await tag_service.delete_tag(go.id)

        [item] = await aggregation.load_feed()

        assert [tag.name for tag in item.tags] == ["RUST"]

    @pytest.mark.asyncio
    async def test_posts_by_author(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        user_service = await unit_env.get(UserService)
        other = await user_service.register(
            username="bob1", email="bob@example.com", password="pass"
        )
        await aggregation.create_post(author.id, "Mine 1", "Body")
        await aggregation.create_post(other.id, "Theirs", "Body")
        await aggregation.create_post(author.id, "Mine 2", "Body")

        posts = await aggregation.get_posts_by_author(author.id)
        first_page = await aggregation.get_posts_by_author(author.id, 1, 1)

        assert [item.post.title for item in posts] == ["Mine 2", "Mine 1"]
        assert [item.post.title for item in first_page] == ["Mine 2"]

    @pytest.mark.asyncio
    async def test_posts_by_author_pages_through_history(self, unit_env, author):
        aggregation = await unit_env.get(PostAggregationService)
        for index in range(5):
            await aggregation.create_post(author.id, f"Mine {index}", "Body")

        pages = [
            await aggregation.get_posts_by_author(author.id, page, 2)
            for page in (1, 2, 3, 4)
        ]

        assert [[item.post.title for item in page] for page in pages] == [
            ["Mine 4", "Mine 3"],
            ["Mine 2", "Mine 1"],
            ["Mine 0"],
            [],
        ]

    @pytest.mark.asyncio
    async def test_deleted_author_reads_as_none(self, unit_env, author):
        """Posts of a deleted account stay listed without an author."""
        aggregation = await unit_env.get(PostAggregationService)
        user_service = await unit_env.get(UserService)
        post = await aggregation.create_post(author.id, "Hello", "Body", ["go"])
        await user_service.delete_user(author.id)

        [item] = await aggregation.load_feed()
        detail = await aggregation.load_post_detail(post.id)

        assert item.post.id == post.id
        assert item.author is None
        assert [tag.name for tag in item.tags] == ["GO"]
        assert detail.author is None
        assert detail.post.author_id == author.id
