"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase
from .get_user_stats import (
    GetUserStatsRequest,
    GetUserStatsResponse,
    GetUserStatsUseCase,
)
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from .update_user import UpdateUserRequest, UpdateUserResponse, UpdateUserUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "GetUserStatsRequest",
    "GetUserStatsResponse",
    "GetUserStatsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UpdateUserRequest",
    "UpdateUserResponse",
    "UpdateUserUseCase",
]
