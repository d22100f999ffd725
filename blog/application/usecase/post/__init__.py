"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .get_post_detail import (
    GetPostDetailRequest,
    GetPostDetailResponse,
    GetPostDetailUseCase,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .list_posts_by_author import (
    ListPostsByAuthorRequest,
    ListPostsByAuthorResponse,
    ListPostsByAuthorUseCase,
)
from .load_feed import LoadFeedRequest, LoadFeedResponse, LoadFeedUseCase
from .replace_post_tags import (
    ReplacePostTagsRequest,
    ReplacePostTagsResponse,
    ReplacePostTagsUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "GetPostDetailRequest",
    "GetPostDetailResponse",
    "GetPostDetailUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ListPostsByAuthorRequest",
    "ListPostsByAuthorResponse",
    "ListPostsByAuthorUseCase",
    "LoadFeedRequest",
    "LoadFeedResponse",
    "LoadFeedUseCase",
    "ReplacePostTagsRequest",
    "ReplacePostTagsResponse",
    "ReplacePostTagsUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
