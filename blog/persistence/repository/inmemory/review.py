"""In-memory review repository for testing."""

from blog.domain.model.review import Review
from blog.domain.repository.review import ReviewColumn, ReviewRepository
from blog.domain.value import ReviewId

from .entity import InMemoryEntityRepository


class InMemoryReviewRepository(
    InMemoryEntityRepository[Review, ReviewId, ReviewColumn], ReviewRepository
):
    """In-memory implementation of ReviewRepository for testing."""

    columns = ReviewColumn
    mutable_fields = ("rate",)
