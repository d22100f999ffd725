"""Domain services."""

from .aggregation_service import PostAggregationService
from .base import Service
from .comment_service import CommentService
from .comment_tree import MAX_COMMENT_DEPTH, build_comment_tree
from .credential import CredentialService
from .post_service import PostService
from .rating import average_rating, rating_value, summarize_ratings
from .review_service import ReviewService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "CommentService",
    "CredentialService",
    "MAX_COMMENT_DEPTH",
    "PostAggregationService",
    "PostService",
    "ReviewService",
    "Service",
    "TagService",
    "UserService",
    "average_rating",
    "build_comment_tree",
    "rating_value",
    "summarize_ratings",
]
