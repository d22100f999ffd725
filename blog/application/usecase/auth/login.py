"""Login use case."""

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.base import AuthSession
from blog.domain.error import AuthenticationError
from blog.domain.model import User
from blog.domain.service import UserService


class LoginRequest(BaseModel):
    """Login request with username and password."""

    username: str = Field(min_length=4, max_length=12)
    password: str = Field(min_length=1, repr=False)


class LoginResponse(BaseModel):
    """Login response.

    ``session`` identifies the caller on every later mutating request.
    """

    session: AuthSession
    user: User


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Session and user (password cleared)

        Raises:
            AuthenticationError: If the credentials do not match a live account
        """
        with logfire.span("login.execute", username=request.username):
            user = await self.user_service.authenticate(
                request.username, request.password
            )
            if user is None:
                raise AuthenticationError()

            logfire.info("Login successful", user_id=user.id)
            return LoginResponse(
                session=AuthSession(user_id=user.id, username=user.username),
                user=user,
            )
