"""In-memory implementation of User repository for testing."""

from blog.domain.model.user import User
from blog.domain.repository.user import UserColumn, UserRepository
from blog.domain.value import UserId

from .entity import InMemoryEntityRepository


class InMemoryUserRepository(
    InMemoryEntityRepository[User, UserId, UserColumn], UserRepository
):
    """In-memory implementation of UserRepository for testing."""

    columns = UserColumn
    mutable_fields = ("username", "first_name", "last_name", "email", "password")
    unique_fields = ("username", "email")
