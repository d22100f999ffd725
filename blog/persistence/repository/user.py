"""PostgreSQL implementation of User repository."""

from blog.domain.model.user import User
from blog.domain.repository.user import UserColumn, UserRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_user
from blog.persistence.repository.entity import PostgresEntityRepository
from blog.persistence.tables import users_table


class PostgresUserRepository(
    PostgresEntityRepository[User, UserId, UserColumn], UserRepository
):
    """PostgreSQL implementation of UserRepository."""

    table = users_table
    columns = UserColumn
    mutable_fields = ("username", "first_name", "last_name", "email", "password")
    row_mapper = staticmethod(row_to_user)
