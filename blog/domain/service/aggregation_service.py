"""Post aggregation service.

Composes posts with their author, tags, comments and reviews, and owns
the writes that touch both a post and its tag links.
"""

from collections import defaultdict
from typing import Iterable, Optional

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model import Comment, Post, PostAggregate, Review, Tag
from blog.domain.repository import (
    CommentColumn,
    CommentRepository,
    PostColumn,
    PostRepository,
    PostTagRepository,
    ReviewColumn,
    ReviewRepository,
    TagRepository,
    UserRepository,
)
from blog.domain.value import DEFAULT_PAGE_SIZE, Pagination, PostId, UserId

from .base import Service
from .comment_tree import MAX_COMMENT_DEPTH, build_comment_tree, count_nodes
from .rating import summarize_ratings
from .tag_service import TagService


class PostAggregationService(Service):
    """Read models and tag-aware writes for posts.

    Reads are batched: whatever the number of posts, each related entity
    kind costs one query.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        tag_repository: TagRepository,
        post_tag_repository: PostTagRepository,
        comment_repository: CommentRepository,
        review_repository: ReviewRepository,
        tag_service: TagService,
        max_comment_depth: int = MAX_COMMENT_DEPTH,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize the aggregation service.

        Args:
            post_repository: Post repository
            user_repository: User repository
            tag_repository: Tag repository
            post_tag_repository: Post-tag association repository
            comment_repository: Comment repository
            review_repository: Review repository
            tag_service: Tag service (tag upsert)
            max_comment_depth: Levels rendered in a post's comment tree
            default_page_size: Page size used when callers pass page_size <= 0
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.tag_repository = tag_repository
        self.post_tag_repository = post_tag_repository
        self.comment_repository = comment_repository
        self.review_repository = review_repository
        self.tag_service = tag_service
        self.max_comment_depth = max_comment_depth
        self.default_page_size = default_page_size

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        body: str,
        tag_names: Iterable[str] = (),
    ) -> Post:
        """Publish a post and link its tags.

        Each tag name is normalized and resolved through the tag upsert
        rule, so names differing only by case end up as one link.

        Args:
            author_id: Author user ID
            title: Post title
            body: Post body
            tag_names: Raw tag names

        Returns:
            The created post

        Raises:
            NotFoundError: If the author is missing or deleted
        """
        with logfire.span(
            "aggregation_service.create_post", author_id=author_id, title=title
        ):
            if await self.user_repository.get(author_id) is None:
                logfire.error("Author not found", author_id=author_id)
                raise NotFoundError("user", author_id)

            post = await self.post_repository.create(
                Post(author_id=author_id, title=title, body=body)
            )
            tags = await self._attach_tags(post.id, tag_names)

            logfire.info(
                "Post created",
                post_id=post.id,
                tags=[tag.name for tag in tags],
            )
            return post

    async def update_post(
        self, post_id: PostId, title: str, body: str
    ) -> Optional[Post]:
        """Replace the title and body of a post.

        Returns:
            The updated post, or None if missing or deleted
        """
        with logfire.span("aggregation_service.update_post", post_id=post_id):
            current = await self.post_repository.get(post_id)
            if current is None:
                logfire.warn("Post not found for update", post_id=post_id)
                return None

            candidate = Post(**{**current.model_dump(), "title": title, "body": body})
            updated = await self.post_repository.update(post_id, candidate)
            if updated:
                logfire.info("Post updated", post_id=post_id)
            return updated

    async def replace_tag_set(
        self, post_id: PostId, tag_names: Iterable[str]
    ) -> list[Tag]:
        """Swap the tags of a post for a new set.

        Every existing link is dropped and the new set linked from
        scratch, even when both sets are equal.

        Args:
            post_id: Post ID
            tag_names: Raw tag names of the new set

        Returns:
            The tags now linked to the post

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        with logfire.span("aggregation_service.replace_tag_set", post_id=post_id):
            if await self.post_repository.get(post_id) is None:
                logfire.error("Post not found for tag replacement", post_id=post_id)
                raise NotFoundError("post", post_id)

            removed = await self.post_tag_repository.remove_all_for_post(post_id)
            tags = await self._attach_tags(post_id, tag_names)

            logfire.info(
                "Post tags replaced",
                post_id=post_id,
                removed=removed,
                tags=[tag.name for tag in tags],
            )
            return tags

    async def _attach_tags(
        self, post_id: PostId, tag_names: Iterable[str]
    ) -> list[Tag]:
        tags = await self.tag_service.get_or_create_tags(tag_names)
        for tag in tags:
            await self.post_tag_repository.associate(post_id, tag.id)
        return tags

    async def load_feed(
        self, page: int = 1, page_size: int = 0
    ) -> list[PostAggregate]:
        """Load a page of posts with everything needed to display them.

        Args:
            page: 1-based page number
            page_size: Posts per page (<= 0 means the default)

        Returns:
            One aggregate per live post on the page, newest first
        """
        with logfire.span("aggregation_service.load_feed", page=page):
            posts = await self.post_repository.get_all(page, page_size)
            feed = await self._assemble(posts)
            logfire.info("Feed loaded", page=page, count=len(feed))
            return feed

    async def get_posts_by_author(
        self, author_id: UserId, page: int = 1, page_size: int = 0
    ) -> list[PostAggregate]:
        """Load a page of an author's posts, newest first."""
        pagination = Pagination.of(page, page_size, self.default_page_size)
        with logfire.span(
            "aggregation_service.get_posts_by_author",
            author_id=author_id,
            page=pagination.page,
        ):
            posts = await self.post_repository.find_page_by(
                author_id, PostColumn.AUTHOR_ID, pagination.page, pagination.page_size
            )
            return await self._assemble(posts)

    async def load_post_detail(self, post_id: PostId) -> Optional[PostAggregate]:
        """Load one post with its threaded comments and rating.

        Args:
            post_id: Post ID

        Returns:
            The aggregate, or None if the post is missing or deleted
        """
        with logfire.span("aggregation_service.load_post_detail", post_id=post_id):
            post = await self.post_repository.get(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                return None

            [aggregate] = await self._assemble([post], with_tree=True)
            logfire.info(
                "Post detail loaded",
                post_id=post_id,
                comments=len(aggregate.comments),
                rendered=count_nodes(aggregate.comment_tree),
                reviews=aggregate.rating.count,
            )
            return aggregate

    async def _assemble(
        self, posts: list[Post], with_tree: bool = False
    ) -> list[PostAggregate]:
        """Join posts with their related rows, one query per entity kind."""
        if not posts:
            return []

        post_ids = [post.id for post in posts]

        authors = {
            user.id: user.without_password()
            for user in await self.user_repository.get_many(
                {post.author_id for post in posts}
            )
        }

        tag_map = await self.post_tag_repository.tag_ids_for_posts(post_ids)
        tags = {
            tag.id: tag
            for tag in await self.tag_repository.get_many(
                {tag_id for tag_ids in tag_map.values() for tag_id in tag_ids}
            )
        }

        comments: dict[PostId, list[Comment]] = defaultdict(list)
        for comment in await self.comment_repository.find_in(
            CommentColumn.POST_ID, post_ids
        ):
            comments[comment.post_id].append(comment)

        reviews: dict[PostId, list[Review]] = defaultdict(list)
        for review in await self.review_repository.find_in(
            ReviewColumn.POST_ID, post_ids
        ):
            reviews[review.post_id].append(review)

        aggregates = []
        for post in posts:
            post_comments = comments[post.id]
            tree = (
                build_comment_tree(post_comments, self.max_comment_depth)
                if with_tree
                else []
            )
            aggregates.append(
                PostAggregate(
                    post=post,
                    author=authors.get(post.author_id),
                    tags=[
                        tags[tag_id]
                        for tag_id in tag_map.get(post.id, [])
                        if tag_id in tags
                    ],
                    comments=post_comments,
                    reviews=reviews[post.id],
                    rating=summarize_ratings(reviews[post.id]),
                    comment_tree=tree,
                )
            )
        return aggregates
