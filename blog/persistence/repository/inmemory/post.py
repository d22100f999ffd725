"""In-memory implementation of Post repository for testing."""

from blog.domain.model.post import Post
from blog.domain.repository.post import PostColumn, PostRepository
from blog.domain.value import PostId

from .entity import InMemoryEntityRepository


class InMemoryPostRepository(
    InMemoryEntityRepository[Post, PostId, PostColumn], PostRepository
):
    """In-memory implementation of PostRepository for testing."""

    columns = PostColumn
    mutable_fields = ("title", "body")
