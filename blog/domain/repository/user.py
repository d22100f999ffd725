"""User repository interface."""

from abc import ABC
from enum import Enum

from blog.domain.model.user import User
from blog.domain.repository.base import EntityRepository
from blog.domain.value import UserId


class UserColumn(str, Enum):
    """Columns users can be looked up by."""

    USERNAME = "username"
    EMAIL = "email"


class UserRepository(EntityRepository[User, UserId, UserColumn], ABC):
    """Repository interface for the User aggregate.

    Usernames and emails are unique; ``create`` and ``update`` raise
    ``ConflictError`` when either collides with an existing row.
    """

    resource = "user"
