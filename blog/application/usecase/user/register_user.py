"""Register user use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field, field_validator, model_validator

from blog.domain.model import User
from blog.domain.service import UserService
from blog.domain.value.types import check_email


class RegisterUserRequest(BaseModel):
    """Register user request.

    Everything here is checked before the stores are touched.
    """

    username: str = Field(min_length=4, max_length=12)
    email: str = Field(max_length=255)
    password: str = Field(min_length=4, repr=False)
    confirm_password: str = Field(repr=False)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the email format."""
        return check_email(v)

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterUserRequest":
        """Reject a confirmation that differs from the password."""
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user: User


class RegisterUserUseCase:
    """Use case for creating an account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute register user flow.

        Raises:
            ConflictError: If the username or email is taken
        """
        with logfire.span("register_user.execute", username=request.username):
            user = await self.user_service.register(
                username=request.username,
                email=request.email,
                password=request.password,
                first_name=request.first_name,
                last_name=request.last_name,
            )
            return RegisterUserResponse(user=user)
