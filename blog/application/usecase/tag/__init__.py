"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagResponse, DeleteTagUseCase
from .get_tag import GetTagRequest, GetTagResponse, GetTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .top_tags import TopTagsRequest, TopTagsResponse, TopTagsUseCase
from .update_tag import UpdateTagRequest, UpdateTagResponse, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagResponse",
    "DeleteTagUseCase",
    "GetTagRequest",
    "GetTagResponse",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TopTagsRequest",
    "TopTagsResponse",
    "TopTagsUseCase",
    "UpdateTagRequest",
    "UpdateTagResponse",
    "UpdateTagUseCase",
]
