"""Get user use case."""

from pydantic import BaseModel

from blog.domain.model import User
from blog.domain.service import UserService
from blog.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UserId


class GetUserResponse(BaseModel):
    """Get user response; ``user`` is None when not found."""

    user: User | None


class GetUserUseCase:
    """Use case for reading one account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow."""
        user = await self.user_service.get_user(request.user_id)
        return GetUserResponse(user=user)
