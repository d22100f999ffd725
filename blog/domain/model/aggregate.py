"""Read models composed from several entities."""

from typing import Optional

from pydantic import Field

from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel
from blog.domain.model.post import Post
from blog.domain.model.review import Review
from blog.domain.model.tag import Tag
from blog.domain.model.user import User

FULL_STAR = "★"
HALF_STAR = "½"
MAX_STARS = 5


class RatingSummary(DomainModel):
    """Mean rate and number of live reviews for a post."""

    average: float = Field(default=0.0, ge=0.0, le=5.0)
    count: int = Field(default=0, ge=0)

    @property
    def stars(self) -> str:
        """Star rendering of the average.

        One full star per whole point, plus a half star when the
        fractional part is at least 0.5 and there is room left.
        """
        full = int(self.average)
        stars = FULL_STAR * max(0, full)
        if self.average - full >= 0.5 and full < MAX_STARS:
            stars += HALF_STAR
        return stars


class CommentNode(DomainModel):
    """Node of a rendered comment thread.

    ``depth`` is the rendering level (0 for top-level). Comments nested
    deeper than the configured cap are attached at the last level, so
    ``depth`` can be lower than the comment's natural depth.
    """

    comment: Comment
    depth: int
    children: list["CommentNode"] = Field(default_factory=list)


class UserStats(DomainModel):
    """Activity counters shown on a user profile."""

    post_count: int = 0
    comments_count: int = 0
    reviews_count: int = 0


class PostAggregate(DomainModel):
    """A post together with everything needed to display it.

    ``comment_tree`` is only populated by the post detail view; the feed
    leaves it empty and exposes the flat ``comments`` list.
    """

    post: Post
    author: Optional[User] = None
    tags: list[Tag] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    reviews: list[Review] = Field(default_factory=list)
    rating: RatingSummary = Field(default_factory=RatingSummary)
    comment_tree: list[CommentNode] = Field(default_factory=list)
