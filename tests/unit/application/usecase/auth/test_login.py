"""Unit tests for LoginUseCase."""

import pytest

from blog.application.usecase.auth import LoginRequest, LoginUseCase
from blog.domain.error import AuthenticationError
from blog.domain.service import UserService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_session(self, unit_env, user_data):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(LoginUseCase)
        user = await user_service.register(**user_data)

        response = await use_case.execute(
            LoginRequest(username="alice", password=user_data["password"])
        )

        assert response.session.user_id == user.id
        assert response.session.username == "alice"
        assert response.user.password is None

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, unit_env, user_data):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(LoginUseCase)
        await user_service.register(**user_data)

        with pytest.raises(AuthenticationError):
            await use_case.execute(LoginRequest(username="alice", password="nope"))

    @pytest.mark.asyncio
    async def test_unknown_user_is_rejected(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(LoginRequest(username="nobody", password="x"))


# Hashing with the production Argon2 cost parameters
credential_env = create_env_fixture(unmock={"credential"})


class TestLoginWithProductionHashing:
    """Login through the real credential component."""

    @pytest.mark.asyncio
    async def test_round_trip(self, credential_env, user_data):
        user_service = await credential_env.get(UserService)
        use_case = await credential_env.get(LoginUseCase)
        await user_service.register(**user_data)

        response = await use_case.execute(
            LoginRequest(username="alice", password=user_data["password"])
        )

        assert response.session.username == "alice"
