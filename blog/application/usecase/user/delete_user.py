"""Delete user use case."""

from pydantic import BaseModel

from blog.domain.error import NotAuthorizedError
from blog.domain.service import UserService
from blog.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: UserId
    actor_id: UserId


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    deleted: bool


class DeleteUserUseCase:
    """Use case for closing one's own account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotAuthorizedError: If the actor deletes someone else's account
        """
        if request.actor_id != request.user_id:
            raise NotAuthorizedError("user", request.user_id, request.actor_id)

        deleted = await self.user_service.delete_user(request.user_id)
        return DeleteUserResponse(deleted=deleted)
