"""Create tag use case."""

import logfire
from pydantic import BaseModel, field_validator

from blog.domain.model import Tag
from blog.domain.service import TagService
from blog.domain.value.types import normalize_tag_name


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Normalize the tag name."""
        return normalize_tag_name(v)


class CreateTagResponse(BaseModel):
    """Create tag response."""

    tag: Tag


class CreateTagUseCase:
    """Use case for creating a tag.

    Creating a tag that already exists, whatever its case, returns the
    existing tag.
    """

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow."""
        with logfire.span("create_tag.execute", name=request.name):
            tag = await self.tag_service.get_or_create_tag(request.name)
            return CreateTagResponse(tag=tag)
