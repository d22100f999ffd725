"""In-memory comment repository for testing."""

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentColumn, CommentRepository
from blog.domain.value import CommentId

from .entity import InMemoryEntityRepository


class InMemoryCommentRepository(
    InMemoryEntityRepository[Comment, CommentId, CommentColumn], CommentRepository
):
    """In-memory implementation of CommentRepository for testing."""

    columns = CommentColumn
    mutable_fields = ("body",)
