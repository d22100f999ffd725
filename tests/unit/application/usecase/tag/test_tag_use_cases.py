"""Unit tests for tag use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.application.usecase.tag import (
    CreateTagUseCase,
    ListTagsUseCase,
    TopTagsUseCase,
    UpdateTagUseCase,
)
from blog.application.usecase.tag.create_tag import CreateTagRequest
from blog.application.usecase.tag.list_tags import ListTagsRequest
from blog.application.usecase.tag.top_tags import TopTagsRequest
from blog.application.usecase.tag.update_tag import UpdateTagRequest
from blog.domain.repository import PostTagRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTagUseCase:
    """Tests for CreateTagUseCase."""

    @pytest.mark.asyncio
    async def test_existing_tag_is_returned(self, unit_env):
        use_case = await unit_env.get(CreateTagUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)

        first = await use_case.execute(CreateTagRequest(name="Rust"))
        second = await use_case.execute(CreateTagRequest(name="rust"))

        assert first.tag.id == second.tag.id
        assert len((await list_tags.execute(ListTagsRequest())).tags) == 1

    def test_blank_name_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            CreateTagRequest(name="  ")


class TestUpdateTagUseCase:
    """Tests for UpdateTagUseCase."""

    @pytest.mark.asyncio
    async def test_rename(self, unit_env):
        create = await unit_env.get(CreateTagUseCase)
        update = await unit_env.get(UpdateTagUseCase)
        tag = (await create.execute(CreateTagRequest(name="py"))).tag

        response = await update.execute(UpdateTagRequest(tag_id=tag.id, name="Python"))

        assert response.tag.name == "PYTHON"


class TestTopTagsUseCase:
    """Tests for TopTagsUseCase."""

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_bounds(self, limit):
        with pytest.raises(PydanticValidationError):
            TopTagsRequest(limit=limit)

    @pytest.mark.asyncio
    async def test_ranking(self, unit_env):
        create = await unit_env.get(CreateTagUseCase)
        top = await unit_env.get(TopTagsUseCase)
        post_tag_repo = await unit_env.get(PostTagRepository)
        go = (await create.execute(CreateTagRequest(name="go"))).tag
        rust = (await create.execute(CreateTagRequest(name="rust"))).tag
        await post_tag_repo.associate(1, rust.id)
        await post_tag_repo.associate(2, rust.id)
        await post_tag_repo.associate(1, go.id)

        response = await top.execute(TopTagsRequest(limit=1))

        assert [tag.name for tag in response.tags] == ["RUST"]
