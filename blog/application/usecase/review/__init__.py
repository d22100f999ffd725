"""Review use cases."""

from .delete_review import (
    DeleteReviewRequest,
    DeleteReviewResponse,
    DeleteReviewUseCase,
)
from .list_reviews import ListReviewsRequest, ListReviewsResponse, ListReviewsUseCase
from .submit_review import (
    SubmitReviewRequest,
    SubmitReviewResponse,
    SubmitReviewUseCase,
)
from .update_review import (
    UpdateReviewRequest,
    UpdateReviewResponse,
    UpdateReviewUseCase,
)

__all__ = [
    "DeleteReviewRequest",
    "DeleteReviewResponse",
    "DeleteReviewUseCase",
    "ListReviewsRequest",
    "ListReviewsResponse",
    "ListReviewsUseCase",
    "SubmitReviewRequest",
    "SubmitReviewResponse",
    "SubmitReviewUseCase",
    "UpdateReviewRequest",
    "UpdateReviewResponse",
    "UpdateReviewUseCase",
]
