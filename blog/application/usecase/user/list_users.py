"""List users use case."""

from pydantic import BaseModel

from blog.application.usecase.base import PageRequest
from blog.domain.model import User
from blog.domain.service import UserService


class ListUsersRequest(PageRequest):
    """List users request."""

    pass


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[User]


class ListUsersUseCase:
    """Use case for paging through accounts."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow."""
        users = await self.user_service.list_users(request.page, request.page_size)
        return ListUsersResponse(users=users)
