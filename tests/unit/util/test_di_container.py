"""Unit tests for provider selection and the test container."""

import pytest

from blog.application.usecase.auth import LoginUseCase
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostDetailUseCase,
    GetPostUseCase,
    ListPostsByAuthorUseCase,
    ListPostsUseCase,
    LoadFeedUseCase,
    ReplacePostTagsUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.review import (
    DeleteReviewUseCase,
    ListReviewsUseCase,
    SubmitReviewUseCase,
    UpdateReviewUseCase,
)
from blog.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    TopTagsUseCase,
    UpdateTagUseCase,
)
from blog.application.usecase.user import (
    DeleteUserUseCase,
    GetUserStatsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from blog.domain.repository import PostRepository
from blog.domain.service import PostAggregationService
from blog.persistence.repository.inmemory import InMemoryPostRepository
from blog.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from blog.util.error import ConfigurationError
from tests.di import MockPersistenceProvider, build_test_container
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

USE_CASES = [
    LoginUseCase,
    RegisterUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    GetUserStatsUseCase,
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
    ReplacePostTagsUseCase,
    LoadFeedUseCase,
    GetPostDetailUseCase,
    ListPostsByAuthorUseCase,
    CreateCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
    DeleteCommentUseCase,
    CreateTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
    DeleteTagUseCase,
    TopTagsUseCase,
    SubmitReviewUseCase,
    ListReviewsUseCase,
    UpdateReviewUseCase,
    DeleteReviewUseCase,
]


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is (
            MockPersistenceProvider
        )

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ConfigurationError):
            build_test_container(unmock={"search"})


class TestContainer:
    """Tests for the assembled test container."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("use_case", USE_CASES, ids=lambda c: c.__name__)
    async def test_every_use_case_resolves(self, unit_env, use_case):
        assert isinstance(await unit_env.get(use_case), use_case)

    @pytest.mark.asyncio
    async def test_request_scope_shares_repositories(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        aggregation = await unit_env.get(PostAggregationService)

        assert isinstance(post_repo, InMemoryPostRepository)
        assert aggregation.post_repository is post_repo
