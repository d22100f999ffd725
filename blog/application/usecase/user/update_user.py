"""Update user use case."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from blog.domain.error import NotAuthorizedError
from blog.domain.model import User
from blog.domain.service import UserService
from blog.domain.value import UserId
from blog.domain.value.types import check_email


class UpdateUserRequest(BaseModel):
    """Update user request.

    Fields left as None keep their current value.
    """

    user_id: UserId
    actor_id: UserId  # From the caller's AuthSession
    username: Optional[str] = Field(default=None, min_length=4, max_length=12)
    email: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    password: Optional[str] = Field(default=None, min_length=4, repr=False)
    confirm_password: Optional[str] = Field(default=None, repr=False)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validate the email format."""
        return check_email(v) if v is not None else v

    @model_validator(mode="after")
    def passwords_match(self) -> "UpdateUserRequest":
        """Reject a confirmation that differs from the new password."""
        if self.password is not None and self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UpdateUserResponse(BaseModel):
    """Update user response; ``user`` is None when not found."""

    user: User | None


class UpdateUserUseCase:
    """Use case for editing one's own account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UpdateUserResponse:
        """Execute update user flow.

        Raises:
            NotAuthorizedError: If the actor edits someone else's account
            ConflictError: If the new username or email is taken
        """
        if request.actor_id != request.user_id:
            raise NotAuthorizedError("user", request.user_id, request.actor_id)

        user = await self.user_service.update_user(
            request.user_id,
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
        )
        return UpdateUserResponse(user=user)
