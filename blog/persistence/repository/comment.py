"""PostgreSQL implementation of Comment repository."""

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentColumn, CommentRepository
from blog.domain.value import CommentId
from blog.persistence.mappers import row_to_comment
from blog.persistence.repository.entity import PostgresEntityRepository
from blog.persistence.tables import comments_table


class PostgresCommentRepository(
    PostgresEntityRepository[Comment, CommentId, CommentColumn], CommentRepository
):
    """PostgreSQL implementation of CommentRepository.

    Only the body is mutable; post and parent are fixed at creation.
    """

    table = comments_table
    columns = CommentColumn
    mutable_fields = ("body",)
    row_mapper = staticmethod(row_to_comment)
