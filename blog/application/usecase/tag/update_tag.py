"""Update tag use case."""

from pydantic import BaseModel, field_validator

from blog.domain.model import Tag
from blog.domain.service import TagService
from blog.domain.value import TagId
from blog.domain.value.types import normalize_tag_name


class UpdateTagRequest(BaseModel):
    """Update tag request."""

    tag_id: TagId
    name: str

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Normalize the tag name."""
        return normalize_tag_name(v)


class UpdateTagResponse(BaseModel):
    """Update tag response; ``tag`` is None when not found."""

    tag: Tag | None


class UpdateTagUseCase:
    """Use case for renaming a tag."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: UpdateTagRequest) -> UpdateTagResponse:
        """Execute update tag flow.

        Raises:
            ConflictError: If another tag already has the name
        """
        tag = await self.tag_service.rename_tag(request.tag_id, request.name)
        return UpdateTagResponse(tag=tag)
