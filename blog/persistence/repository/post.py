"""PostgreSQL implementation of Post repository."""

from blog.domain.model.post import Post
from blog.domain.repository.post import PostColumn, PostRepository
from blog.domain.value import PostId
from blog.persistence.mappers import row_to_post
from blog.persistence.repository.entity import PostgresEntityRepository
from blog.persistence.tables import posts_table


class PostgresPostRepository(
    PostgresEntityRepository[Post, PostId, PostColumn], PostRepository
):
    """PostgreSQL implementation of PostRepository.

    The author of a post never changes, so only title and body are updated.
    """

    table = posts_table
    columns = PostColumn
    mutable_fields = ("title", "body")
    row_mapper = staticmethod(row_to_post)
