"""Integration tests for the SQL entity store."""

import pytest

from blog.domain.error import ConflictError, MultipleMatchesError
from blog.domain.model import Comment, Post, Review, User
from blog.domain.repository import (
    CommentColumn,
    PostColumn,
    ReviewColumn,
    UserColumn,
)
from blog.domain.value import Rate
from blog.persistence.database import get_session
from blog.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresReviewRepository,
    PostgresUserRepository,
)


def _user(username: str = "alice") -> User:
    return User(
        username=username,
        email=f"{username}@example.com",
        password="$argon2id$stub",
    )


async def _author(session) -> User:
    return await PostgresUserRepository(session).create(_user())


class TestCreateAndGet:
    """Insert and read back."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, session):
        repo = PostgresUserRepository(session)

        user = await repo.create(_user())

        assert user.id is not None
        assert user.created_at is not None
        assert user.updated_at == user.created_at
        assert user.is_deleted is False
        fetched = await repo.get(user.id)
        assert fetched == user
        assert fetched.password == "$argon2id$stub"

    @pytest.mark.asyncio
    async def test_unique_constraint_maps_to_conflict(self, session):
        repo = PostgresUserRepository(session)
        await repo.create(_user())

        with pytest.raises(ConflictError):
            await repo.create(User(username="alice", email="other@example.com"))

    @pytest.mark.asyncio
    async def test_get_unknown_id(self, session):
        assert await PostgresPostRepository(session).get(404) is None


class TestSoftDelete:
    """Soft delete semantics."""

    @pytest.mark.asyncio
    async def test_delete_is_idempotent_and_hides_row(self, session):
        author = await _author(session)
        repo = PostgresPostRepository(session)
        post = await repo.create(Post(author_id=author.id, title="T", body="B"))

        assert await repo.delete(post.id) is True
        assert await repo.delete(post.id) is False
        assert await repo.get(post.id) is None
        archived = await repo.get(post.id, include_deleted=True)
        assert archived.is_deleted is True
        assert archived.deleted_at is not None

    @pytest.mark.asyncio
    async def test_update_never_resurrects(self, session):
        author = await _author(session)
        repo = PostgresPostRepository(session)
        post = await repo.create(Post(author_id=author.id, title="T", body="B"))
        await repo.delete(post.id)

        result = await repo.update(
            post.id, Post(author_id=author.id, title="New", body="B")
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_update_overwrites_mutable_fields(self, session):
        author = await _author(session)
        repo = PostgresPostRepository(session)
        post = await repo.create(Post(author_id=author.id, title="T", body="B"))

        updated = await repo.update(
            post.id, Post(author_id=author.id, title="New", body="Body")
        )

        assert updated.title == "New"
        assert updated.body == "Body"
        assert updated.created_at == post.created_at
        assert updated.updated_at >= post.updated_at


class TestListing:
    """Pagination, ordering and column lookups."""

    @pytest.mark.asyncio
    async def test_pages_newest_first(self, session):
        author = await _author(session)
        repo = PostgresPostRepository(session, default_page_size=2)
        for title in ("a", "b", "c"):
            await repo.create(Post(author_id=author.id, title=title, body="B"))

        first = await repo.get_all(page=0, page_size=0)
        second = await repo.get_all(page=2, page_size=2)

        assert [post.title for post in first] == ["c", "b"]
        assert [post.title for post in second] == ["a"]
        assert await repo.get_all(page=3, page_size=2) == []

    @pytest.mark.asyncio
    async def test_find_by_and_count_by(self, session):
        author = await _author(session)
        repo = PostgresPostRepository(session)
        await repo.create(Post(author_id=author.id, title="a", body="B"))
        deleted = await repo.create(Post(author_id=author.id, title="b", body="B"))
        await repo.delete(deleted.id)

        live = await repo.find_by(author.id, PostColumn.AUTHOR_ID)
        everything = await repo.find_by(
            author.id, PostColumn.AUTHOR_ID, include_deleted=True
        )

        assert [post.title for post in live] == ["a"]
        assert [post.title for post in everything] == ["b", "a"]
        assert await repo.count_by(author.id, PostColumn.AUTHOR_ID) == 1

    @pytest.mark.asyncio
    async def test_find_page_by_limits_in_the_query(self, session):
        author = await _author(session)
        other = await PostgresUserRepository(session).create(_user("bob1"))
        repo = PostgresPostRepository(session, default_page_size=2)
        for title in ("a", "b", "c"):
            await repo.create(Post(author_id=author.id, title=title, body="B"))
        await repo.create(Post(author_id=other.id, title="other", body="B"))

        first = await repo.find_page_by(author.id, PostColumn.AUTHOR_ID, 1, 0)
        second = await repo.find_page_by(author.id, PostColumn.AUTHOR_ID, 2, 2)

        assert [post.title for post in first] == ["c", "b"]
        assert [post.title for post in second] == ["a"]
        with pytest.raises(ValueError):
            await repo.find_page_by("alice", UserColumn.USERNAME)

    @pytest.mark.asyncio
    async def test_foreign_column_is_rejected(self, session):
        repo = PostgresPostRepository(session)

        with pytest.raises(ValueError):
            await repo.find_by("alice", UserColumn.USERNAME)

    @pytest.mark.asyncio
    async def test_find_one_by(self, session):
        author = await _author(session)
        repo = PostgresPostRepository(session)
        await repo.create(Post(author_id=author.id, title="Same", body="B"))
        await repo.create(Post(author_id=author.id, title="Same", body="B"))

        with pytest.raises(MultipleMatchesError):
            await repo.find_one_by("Same", PostColumn.TITLE)
        users = PostgresUserRepository(session)
        assert (await users.find_one_by("alice", UserColumn.USERNAME)).id == author.id

    @pytest.mark.asyncio
    async def test_batch_reads(self, session):
        author = await _author(session)
        posts = PostgresPostRepository(session)
        comments = PostgresCommentRepository(session)
        first = await posts.create(Post(author_id=author.id, title="1", body="B"))
        second = await posts.create(Post(author_id=author.id, title="2", body="B"))
        top = await comments.create(
            Comment(post_id=first.id, user_id=author.id, body="top")
        )
        await comments.create(
            Comment(
                post_id=first.id,
                user_id=author.id,
                body="reply",
                parent_comment_id=top.id,
            )
        )
        await comments.create(
            Comment(post_id=second.id, user_id=author.id, body="other")
        )

        many = await posts.get_many([first.id, second.id, 404])
        found = await comments.find_in(CommentColumn.POST_ID, [first.id, second.id])

        assert {post.id for post in many} == {first.id, second.id}
        assert [comment.body for comment in found] == ["top", "reply", "other"]
        assert found[1].parent_comment_id == top.id


class TestReviewRepository:
    """Review specifics."""

    @pytest.mark.asyncio
    async def test_rate_round_trips_and_lookup_by_post_and_user(self, session):
        author = await _author(session)
        post = await PostgresPostRepository(session).create(
            Post(author_id=author.id, title="T", body="B")
        )
        repo = PostgresReviewRepository(session)
        review = await repo.create(
            Review(post_id=post.id, user_id=author.id, rate=Rate.FOUR)
        )

        found = await repo.find_by_post_and_user(post.id, author.id)

        assert found.id == review.id
        assert found.rate == Rate.FOUR
        assert await repo.count_by(author.id, ReviewColumn.USER_ID) == 1
        assert await repo.find_by_post_and_user(post.id, 404) is None


class TestUnitOfWork:
    """get_session commits or rolls back the whole block."""

    @pytest.mark.asyncio
    async def test_clean_exit_commits(self, session_factory):
        async with get_session(session_factory) as session:
            user = await PostgresUserRepository(session).create(_user())

        async with session_factory() as session:
            assert await PostgresUserRepository(session).get(user.id) is not None

    @pytest.mark.asyncio
    async def test_exception_rolls_back_every_write(self, session_factory):
        with pytest.raises(RuntimeError):
            async with get_session(session_factory) as session:
                users = PostgresUserRepository(session)
                await users.create(_user("alice"))
                await users.create(_user("bob1"))
                raise RuntimeError("boom")

        async with session_factory() as session:
            assert await PostgresUserRepository(session).get_all() == []
